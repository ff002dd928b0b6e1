"""Tests for core.model_manager module."""

from core.catalog import NUM_CONDITIONS
from core.model_manager import DEFAULT_MODEL_NAME, MODEL_REGISTRY, ModelManager
from core.skin_cnn import INPUT_SIZE


class TestModelRegistry:
    def test_default_model_in_registry(self):
        names = [m.name for m in MODEL_REGISTRY]
        assert DEFAULT_MODEL_NAME in names

    def test_model_matches_catalog(self):
        for model in MODEL_REGISTRY:
            assert model.num_classes == NUM_CONDITIONS
            assert model.input_size == INPUT_SIZE
            assert model.display_name
            assert model.description


class TestModelManager:
    def test_get_model_info(self):
        assert ModelManager.get_model_info(DEFAULT_MODEL_NAME).name == DEFAULT_MODEL_NAME
        assert ModelManager.get_model_info("nonexistent-model") is None

    def test_get_model_path(self, tmp_dir):
        mm = ModelManager(tmp_dir)
        path = mm.get_model_path(DEFAULT_MODEL_NAME)
        assert path == tmp_dir / DEFAULT_MODEL_NAME / "model.pth"

    def test_unavailable_without_weights(self, tmp_dir):
        assert ModelManager(tmp_dir).is_model_available(DEFAULT_MODEL_NAME) is False

    def test_available_with_weights(self, tmp_dir):
        mm = ModelManager(tmp_dir)
        path = mm.get_model_path(DEFAULT_MODEL_NAME)
        path.parent.mkdir(parents=True)
        path.write_bytes(b"weights")
        assert mm.is_model_available(DEFAULT_MODEL_NAME) is True

    def test_unknown_model_unavailable(self, tmp_dir):
        assert ModelManager(tmp_dir).is_model_available("nonexistent-model") is False
