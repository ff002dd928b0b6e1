"""Four-stage interaction workflow: capture -> processing -> result -> prescription.

WorkflowStateMachine is the only writer of the WorkflowSession. Stage changes
go through an explicit transition table; anything outside it raises
IllegalTransitionError. Entering PROCESSING starts one AnalysisWorker, and its
outcome moves the session on to RESULT or back to CAPTURE.
"""

import logging
from typing import Dict, FrozenSet, Optional

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from core.errors import EmptyInputError, IllegalTransitionError
from core.image_preprocessor import RawImage
from core.inference_engine import InferenceEngine
from core.skin_analyzer import AnalysisOutcome, SkinAnalyzer
from core.utils import Prescription, Stage, WorkflowSession
from i18n import t
from workers.analysis_worker import AnalysisWorker, ModelLoadWorker

logger = logging.getLogger(__name__)


TRANSITIONS: Dict[Stage, FrozenSet[Stage]] = {
    Stage.CAPTURE: frozenset({Stage.PROCESSING, Stage.CAPTURE}),
    Stage.PROCESSING: frozenset({Stage.RESULT, Stage.CAPTURE}),
    Stage.RESULT: frozenset({Stage.PRESCRIPTION, Stage.CAPTURE}),
    Stage.PRESCRIPTION: frozenset({Stage.CAPTURE}),
}


def can_transition(source: Stage, target: Stage) -> bool:
    return target in TRANSITIONS[source]


class WorkflowStateMachine(QObject):
    """Drives one user's analysis session."""

    stage_changed = pyqtSignal(object)      # Stage
    error_changed = pyqtSignal(str)         # message, "" when cleared
    busy_changed = pyqtSignal(bool)
    progress = pyqtSignal(int, int, str)    # step, total, message
    model_ready = pyqtSignal()

    def __init__(
        self,
        engine: Optional[InferenceEngine] = None,
        analyzer: Optional[SkinAnalyzer] = None,
        parent=None,
    ):
        super().__init__(parent)
        if analyzer is None:
            analyzer = SkinAnalyzer(engine or InferenceEngine())
        self._analyzer = analyzer
        self._engine = analyzer.engine
        self._session = WorkflowSession()
        self._run_id = 0
        self._worker: Optional[AnalysisWorker] = None
        self._load_worker: Optional[ModelLoadWorker] = None

    # --- Read access ---

    @property
    def session(self) -> WorkflowSession:
        return self._session

    @property
    def stage(self) -> Stage:
        return self._session.stage

    @property
    def engine(self) -> InferenceEngine:
        return self._engine

    @property
    def analyzer(self) -> SkinAnalyzer:
        return self._analyzer

    # --- Startup ---

    def start(self):
        """Begin loading the model in the background."""
        if self._engine.is_loaded or self._load_worker is not None:
            return
        self._load_worker = ModelLoadWorker(self._engine, parent=self)
        self._load_worker.finished.connect(self._on_model_loaded)
        self._load_worker.error.connect(self._on_model_load_failed)
        self._load_worker.start()

    @pyqtSlot()
    def _on_model_loaded(self):
        self._load_worker.wait()
        logger.info("Model loaded at startup")
        self.model_ready.emit()

    @pyqtSlot(str)
    def _on_model_load_failed(self, detail: str):
        self._load_worker.wait()
        self._load_worker = None
        logger.error("Model load failed at startup: %s", detail)
        self._set_error(t("errors.model_load_failed"))

    # --- User-driven transitions ---

    def submit_image(self, image: RawImage):
        """Store a captured or uploaded photo and start analysing it."""
        if self._session.busy:
            raise IllegalTransitionError("An analysis is already in progress")
        if self._session.stage is not Stage.CAPTURE:
            raise IllegalTransitionError(
                f"Cannot submit an image in stage {self._session.stage.value}"
            )
        if image is None or len(image) == 0:
            raise EmptyInputError("No image data provided")

        self._session.image = image
        self._set_error(None)
        self._transition(Stage.PROCESSING)
        self._start_analysis(image)

    def show_prescription(self):
        """Advance from the result view to the treatment plan."""
        if self._session.result is None or self._session.prescription is None:
            raise IllegalTransitionError("No detection result to show a prescription for")
        self._transition(Stage.PRESCRIPTION)

    def restart(self):
        """Reset the session for a new analysis.

        A run still in flight finishes on its own; its outcome is discarded.
        """
        if self._session.busy:
            logger.info("Restart requested during run %d; its outcome will be dropped", self._run_id)
            self._run_id += 1
        self._session.image = None
        self._session.result = None
        self._session.prescription = None
        self._set_error(None)
        self._transition(Stage.CAPTURE)

    def dismiss_error(self):
        self._set_error(None)

    def resolve(self, condition_name: str) -> Prescription:
        """Look up a prescription without touching the session."""
        return self._analyzer.resolver.resolve(condition_name)

    def wait_for_idle(self, timeout_ms: int = -1) -> bool:
        """Block until the in-flight worker thread has returned."""
        worker = self._worker
        if worker is None:
            return True
        if timeout_ms < 0:
            return worker.wait()
        return worker.wait(timeout_ms)

    def shutdown(self):
        """Join every background thread before the application exits."""
        for worker in (self._load_worker, self._worker):
            if worker is not None:
                worker.wait()

    # --- Pipeline run ---

    def _start_analysis(self, image: RawImage):
        self._run_id += 1
        self._set_busy(True)
        worker = AnalysisWorker(self._analyzer, image, self._run_id, parent=self)
        worker.progress.connect(self._on_progress)
        worker.finished.connect(self._on_analysis_finished)
        worker.error.connect(self._on_analysis_failed)
        self._worker = worker
        logger.debug("Starting analysis run %d", self._run_id)
        worker.start()

    @pyqtSlot(int, int, str)
    def _on_progress(self, step: int, total: int, message: str):
        self.progress.emit(step, total, message)

    @pyqtSlot(int, object)
    def _on_analysis_finished(self, run_id: int, outcome: AnalysisOutcome):
        self._join_worker()
        self._set_busy(False)
        if run_id != self._run_id:
            logger.info("Discarding outcome of superseded run %d", run_id)
            return
        self._session.result = outcome.result
        self._session.prescription = outcome.prescription
        self._transition(Stage.RESULT)

    @pyqtSlot(int, str)
    def _on_analysis_failed(self, run_id: int, detail: str):
        self._join_worker()
        self._set_busy(False)
        if run_id != self._run_id:
            logger.info("Discarding failure of superseded run %d: %s", run_id, detail)
            return
        logger.warning("Analysis failed, returning to capture: %s", detail)
        self._session.image = None
        self._set_error(t("errors.analysis_failed"))
        self._transition(Stage.CAPTURE)

    def _join_worker(self):
        # The worker emits its last signal right before run() returns.
        if self._worker is not None:
            self._worker.wait()
            self._worker = None

    # --- Session mutation ---

    def _transition(self, target: Stage):
        source = self._session.stage
        if not can_transition(source, target):
            raise IllegalTransitionError(
                f"Illegal transition {source.value} -> {target.value}"
            )
        self._session.stage = target
        logger.info("Stage %s -> %s", source.value, target.value)
        self.stage_changed.emit(target)

    def _set_error(self, message: Optional[str]):
        if self._session.error == message:
            return
        self._session.error = message
        self.error_changed.emit(message or "")

    def _set_busy(self, busy: bool):
        self._session.busy = busy
        self.busy_changed.emit(busy)
