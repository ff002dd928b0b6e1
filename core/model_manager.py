"""Model registry and local weights lookup."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from core.catalog import NUM_CONDITIONS
from core.skin_cnn import INPUT_SIZE
from core.utils import get_models_dir


@dataclass
class ModelInfo:
    """Metadata about an available AI model."""
    name: str
    display_name: str
    num_classes: int
    input_size: int
    description: str


MODEL_REGISTRY: List[ModelInfo] = [
    ModelInfo(
        name="skingenie-cnn",
        display_name="SkinGenie CNN",
        num_classes=NUM_CONDITIONS,
        input_size=INPUT_SIZE,
        description="Three-stage CNN classifying skin photographs into the condition catalog.",
    ),
]

DEFAULT_MODEL_NAME = "skingenie-cnn"


class ModelManager:
    """Locates model weights on disk."""

    def __init__(self, models_dir: Optional[Path] = None):
        self._models_dir = Path(models_dir) if models_dir is not None else get_models_dir()

    @staticmethod
    def get_model_info(model_name: str) -> Optional[ModelInfo]:
        """Get info for a specific model."""
        for model in MODEL_REGISTRY:
            if model.name == model_name:
                return model
        return None

    def get_model_path(self, model_name: str) -> Path:
        """Get the local path for a model's weights file."""
        return self._models_dir / model_name / "model.pth"

    def is_model_available(self, model_name: str) -> bool:
        """Check whether trained weights exist locally for a model."""
        if self.get_model_info(model_name) is None:
            return False
        return self.get_model_path(model_name).exists()
