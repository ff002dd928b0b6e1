"""Background workers for model loading and skin photo analysis."""

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from core.errors import SkinGenieError
from core.image_preprocessor import RawImage
from core.inference_engine import InferenceEngine
from core.skin_analyzer import SkinAnalyzer

logger = logging.getLogger(__name__)


class AnalysisWorker(QThread):
    """Runs one pipeline pass off the UI thread.

    Every signal carries the run id it was started with so the receiver can
    drop outcomes of runs it no longer cares about.
    """

    progress = pyqtSignal(int, int, str)   # step, total, message
    finished = pyqtSignal(int, object)     # run id, AnalysisOutcome
    error = pyqtSignal(int, str)           # run id, error detail

    def __init__(self, analyzer: SkinAnalyzer, image: RawImage, run_id: int, parent=None):
        super().__init__(parent)
        self._analyzer = analyzer
        self._image = image
        self._run_id = run_id

    @property
    def run_id(self) -> int:
        return self._run_id

    def run(self):
        try:
            outcome = self._analyzer.analyze(self._image, on_progress=self._on_progress)
        except SkinGenieError as e:
            logger.warning("Analysis run %d failed: %s: %s", self._run_id, type(e).__name__, e)
            self.error.emit(self._run_id, f"{type(e).__name__}: {e}")
        except Exception as e:
            logger.exception("Analysis run %d crashed", self._run_id)
            self.error.emit(self._run_id, f"Analysis failed: {e}")
        else:
            self.finished.emit(self._run_id, outcome)

    def _on_progress(self, step: int, total: int, message: str):
        self.progress.emit(step, total, message)


class ModelLoadWorker(QThread):
    """Loads the classification model in the background at startup."""

    finished = pyqtSignal()
    error = pyqtSignal(str)

    def __init__(self, engine: InferenceEngine, parent=None):
        super().__init__(parent)
        self._engine = engine

    def run(self):
        try:
            self._engine.ensure_loaded()
        except Exception as e:
            self.error.emit(str(e))
        else:
            self.finished.emit()
