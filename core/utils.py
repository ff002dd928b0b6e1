"""Shared utilities, dataclasses, validation, and platform-specific paths."""

import base64
import mimetypes
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple


# --- Type aliases ---

ProgressCallback = Callable[[int, int, str], None]  # (step, total, message)


# --- Enums ---

class Stage(Enum):
    CAPTURE = "capture"
    PROCESSING = "processing"
    RESULT = "result"
    PRESCRIPTION = "prescription"


# --- Dataclasses ---

@dataclass(frozen=True)
class Product:
    """A product recommended alongside a prescription."""
    name: str
    type: str
    description: str
    usage: str
    price: Optional[str] = None
    purchase_link: Optional[str] = None


@dataclass(frozen=True)
class Prescription:
    """Treatment record for a single condition."""
    medication: str
    dosage: str
    duration: str
    precautions: Tuple[str, ...]
    recommended_products: Tuple[Product, ...]
    alternatives: Optional[Tuple[str, ...]] = None


@dataclass
class RankedCondition:
    """A candidate condition with its confidence on the 0-100 scale."""
    name: str
    confidence: float
    description: str = ""


@dataclass
class DetectionResult:
    """Outcome of classifying one image."""
    disease: str
    confidence: float
    description: str
    additional_conditions: List[RankedCondition] = field(default_factory=list)
    disclaimer: str = (
        "This is a screening aid, NOT a diagnostic tool. "
        "Always consult a qualified healthcare professional."
    )


@dataclass
class WorkflowSession:
    """State shared with the interaction layer. Only the workflow mutates it."""
    stage: Stage = Stage.CAPTURE
    image: Optional[str] = None
    result: Optional[DetectionResult] = None
    prescription: Optional[Prescription] = None
    error: Optional[str] = None
    busy: bool = False


@dataclass
class ValidationResult:
    """Result of image validation."""
    valid: bool
    error_message: str = ""
    image_width: int = 0
    image_height: int = 0
    file_size_bytes: int = 0


# --- Platform-specific paths ---

def get_data_dir() -> Path:
    """Get the platform-specific application data directory."""
    if sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support" / "SkinGenie"
    elif sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home())) / "SkinGenie"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "skingenie"
    base.mkdir(parents=True, exist_ok=True)
    return base


def get_models_dir() -> Path:
    """Get the directory holding trained model weights."""
    models_dir = get_data_dir() / "models"
    models_dir.mkdir(parents=True, exist_ok=True)
    return models_dir


# --- Validation ---

SUPPORTED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".webp"}


def validate_skin_image(file_path: str) -> ValidationResult:
    """Validate that a file is an uploadable skin photo."""
    from i18n import t

    if not file_path:
        return ValidationResult(valid=False, error_message=t("validation.no_file"))

    path = Path(file_path)

    if not path.exists():
        return ValidationResult(valid=False, error_message=t("validation.file_not_found"))

    if not path.is_file():
        return ValidationResult(valid=False, error_message=t("validation.not_a_file"))

    file_size = path.stat().st_size
    if file_size == 0:
        return ValidationResult(valid=False, error_message=t("validation.empty_file"))

    ext = path.suffix.lower()
    if ext not in SUPPORTED_IMAGE_EXTENSIONS:
        return ValidationResult(
            valid=False,
            error_message=t("validation.unsupported_format", ext=ext),
        )

    try:
        from PIL import Image
        with Image.open(str(path)) as img:
            width, height = img.size
    except Exception:
        return ValidationResult(
            valid=False,
            error_message=t("validation.cannot_read_image"),
        )

    return ValidationResult(
        valid=True,
        image_width=width,
        image_height=height,
        file_size_bytes=file_size,
    )


def image_file_to_data_uri(file_path: str) -> str:
    """Read an image file and encode it as a base64 data URI."""
    path = Path(file_path)
    mime_type, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type or 'application/octet-stream'};base64,{encoded}"
