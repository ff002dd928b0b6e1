"""Skin condition detection and treatment resolution.

One analysis runs preprocess -> load model -> infer -> classify -> resolve,
strictly in order. The input and output tensors of a run are owned by a
TensorScope and released on every exit path.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from core.classifier import ConditionClassifier
from core.image_preprocessor import ImagePreprocessor, RawImage
from core.inference_engine import InferenceEngine
from core.prescriptions import PrescriptionResolver
from core.tensor_scope import TensorLedger, TensorScope
from core.utils import DetectionResult, Prescription, ProgressCallback

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOutcome:
    """Detection result and the treatment resolved for it."""
    result: DetectionResult
    prescription: Prescription
    processing_time_ms: int = 0


class SkinAnalyzer:
    """Runs the full detection-and-resolution pipeline for one photo."""

    TOTAL_STEPS = 5

    def __init__(
        self,
        engine: InferenceEngine,
        preprocessor: Optional[ImagePreprocessor] = None,
        classifier: Optional[ConditionClassifier] = None,
        resolver: Optional[PrescriptionResolver] = None,
        ledger: Optional[TensorLedger] = None,
    ):
        self.engine = engine
        self.preprocessor = preprocessor or ImagePreprocessor(engine.model_info.input_size)
        self.classifier = classifier or ConditionClassifier()
        self.resolver = resolver or PrescriptionResolver()
        self.ledger = ledger or TensorLedger()

    def analyze(
        self,
        image: RawImage,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AnalysisOutcome:
        """Analyze one photo. Raises a SkinGenieError subclass on failure."""
        from i18n import t

        start_time = time.time()

        def report(step, msg):
            if on_progress:
                on_progress(step, self.TOTAL_STEPS, msg)

        with TensorScope(self.ledger) as scope:
            report(1, t("progress.preprocessing"))
            tensor = scope.track(self.preprocessor.normalize(image))

            report(2, t("progress.loading_model"))
            self.engine.ensure_loaded()

            report(3, t("progress.inference"))
            output = self.engine.predict(tensor, scope)
            scope.release(tensor)
            probabilities = output.tolist()
            scope.release(output)

        report(4, t("progress.classifying"))
        result = self.classifier.classify(probabilities)
        logger.info("Detected %s (%.1f%%)", result.disease, result.confidence)

        report(5, t("progress.resolving"))
        prescription = self.resolver.resolve(result.disease)

        elapsed_ms = int((time.time() - start_time) * 1000)
        return AnalysisOutcome(
            result=result,
            prescription=prescription,
            processing_time_ms=elapsed_ms,
        )
