"""Owns the classification model and runs inference on preprocessed photos."""

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

import torch

from core.errors import (
    InferenceError,
    ModelLoadError,
    ModelNotLoadedError,
    ShapeMismatchError,
)
from core.model_manager import DEFAULT_MODEL_NAME, ModelInfo, ModelManager
from core.skin_cnn import SkinConditionCNN
from core.tensor_scope import TensorScope

logger = logging.getLogger(__name__)


class InferenceEngine:
    """Holds a single model instance with an explicit not-loaded/loaded state.

    The model is built at most once; after that it is only read, so one engine
    can serve any number of pipeline runs.
    """

    def __init__(
        self,
        model_factory: Optional[Callable[[], torch.nn.Module]] = None,
        weights_path: Optional[Path] = None,
        model_info: Optional[ModelInfo] = None,
    ):
        self._info = model_info or ModelManager.get_model_info(DEFAULT_MODEL_NAME)
        self._num_classes = self._info.num_classes
        self._model_factory = model_factory or (
            lambda: SkinConditionCNN(self._info.num_classes, input_size=self._info.input_size)
        )
        self._weights_path = weights_path
        self._model: Optional[torch.nn.Module] = None
        self._lock = threading.Lock()
        self.build_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @property
    def model_info(self) -> ModelInfo:
        return self._info

    def ensure_loaded(self):
        """Build the model if it has not been built yet. Safe to call repeatedly."""
        if self._model is not None:
            return
        with self._lock:
            if self._model is not None:
                return
            try:
                model = self._build_model()
            except Exception as e:
                logger.exception("Failed to load classification model")
                raise ModelLoadError(f"Failed to load AI model: {e}") from e
            self._model = model
            logger.info("%s ready (%d classes)", self._info.display_name, self._num_classes)

    def _build_model(self) -> torch.nn.Module:
        model = self._model_factory()
        self.build_count += 1

        weights_path = self._weights_path
        if weights_path is None:
            weights_path = ModelManager().get_model_path(self._info.name)

        if Path(weights_path).exists():
            state_dict = torch.load(str(weights_path), map_location="cpu", weights_only=True)
            model.load_state_dict(state_dict)
            logger.info("Loaded trained weights from %s", weights_path)
        else:
            logger.warning("No trained weights at %s, using initial weights", weights_path)

        model.eval()
        return model

    def predict(self, tensor: torch.Tensor, scope: Optional[TensorScope] = None) -> torch.Tensor:
        """Return the probability vector for a (1, H, W, 3) input tensor.

        The returned 1-D tensor is a new allocation. When a scope is given it
        takes ownership of the output before the shape is checked, so a
        rejected output is still released with the scope.
        """
        if self._model is None:
            raise ModelNotLoadedError("Model has not been loaded")

        try:
            with torch.inference_mode():
                raw = self._model(tensor)
                output = raw.reshape(-1)
        except Exception as e:
            raise InferenceError(f"Inference failed: {e}") from e

        if scope is not None:
            scope.track(output)

        if raw.ndim != 2 or raw.shape[0] != 1 or raw.shape[1] != self._num_classes:
            if scope is None:
                TensorScope.dispose(output)
            raise ShapeMismatchError(
                f"Model output shape {tuple(raw.shape)} does not match "
                f"{self._num_classes} catalog conditions"
            )
        return output
