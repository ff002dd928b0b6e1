"""Shared test fixtures for SkinGenie."""

import base64
import io
import os
import tempfile
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
import torch
from PIL import Image

from core.catalog import NUM_CONDITIONS
from core.inference_engine import InferenceEngine
from core.skin_analyzer import SkinAnalyzer
from core.tensor_scope import TensorLedger


def encode_image(img: Image.Image, fmt: str = "PNG") -> str:
    """Encode a PIL image as a base64 data URI."""
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    mime = "image/png" if fmt == "PNG" else "image/jpeg"
    return f"data:{mime};base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


def make_distribution(winner: int, peak: float = 0.6) -> torch.Tensor:
    """A probability vector with `peak` at `winner` and the rest spread evenly."""
    rest = (1.0 - peak) / (NUM_CONDITIONS - 1)
    probs = torch.full((NUM_CONDITIONS,), rest)
    probs[winner] = peak
    return probs


class FixedOutputModel(torch.nn.Module):
    """Stand-in model that returns the same distribution for every input."""

    def __init__(self, probabilities: torch.Tensor):
        super().__init__()
        self.register_buffer("probabilities", probabilities.clone())
        self.calls = 0
        self.last_output = None

    def forward(self, x):
        self.calls += 1
        self.last_output = self.probabilities.unsqueeze(0).expand(x.shape[0], -1).clone()
        return self.last_output


class FailingModel(torch.nn.Module):
    def forward(self, x):
        raise RuntimeError("numeric failure")


class CountingFactory:
    """Model factory that records how many models it built."""

    def __init__(self, make_model):
        self._make_model = make_model
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self._make_model()


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def missing_weights(tmp_dir):
    """A weights path that does not exist, so engines keep initial weights."""
    return tmp_dir / "no-weights" / "model.pth"


@pytest.fixture
def sample_rgb_image(tmp_dir):
    """Create a sample 300x200 RGB photo on disk."""
    img = Image.fromarray(np.random.randint(0, 255, (200, 300, 3), dtype=np.uint8))
    path = tmp_dir / "sample_rgb.png"
    img.save(path)
    return str(path)


@pytest.fixture
def sample_data_uri():
    """A decodable 320x240 RGB photo as a data URI."""
    img = Image.fromarray(np.random.randint(0, 255, (240, 320, 3), dtype=np.uint8))
    return encode_image(img)


@pytest.fixture
def corrupt_data_uri():
    """A data URI whose base64 payload is not an image."""
    payload = base64.b64encode(b"\x00\x01not really an image\xff" * 8).decode("ascii")
    return f"data:image/png;base64,{payload}"


@pytest.fixture
def fixed_probabilities():
    return make_distribution(winner=5, peak=0.8234)


@pytest.fixture
def fake_engine(fixed_probabilities, missing_weights):
    """An InferenceEngine whose model always predicts Eczema (index 5)."""
    factory = CountingFactory(lambda: FixedOutputModel(fixed_probabilities))
    engine = InferenceEngine(model_factory=factory, weights_path=missing_weights)
    engine.factory = factory
    return engine


@pytest.fixture
def failing_engine(missing_weights):
    return InferenceEngine(model_factory=FailingModel, weights_path=missing_weights)


@pytest.fixture
def ledger():
    return TensorLedger()


@pytest.fixture
def analyzer(fake_engine, ledger):
    return SkinAnalyzer(fake_engine, ledger=ledger)


@pytest.fixture(autouse=True)
def _init_i18n():
    """Initialize i18n for all tests."""
    import i18n
    i18n.init("en")
