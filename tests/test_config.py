"""Tests for RenderConfig and logging setup."""

import dataclasses
import logging
import math

import pytest


class TestRenderConfig:
    """Tests for render configuration defaults and validation."""

    def test_defaults(self):
        from tinyray.core.config import RenderConfig

        config = RenderConfig()
        assert (config.width, config.height) == (1024, 768)
        assert config.fov == pytest.approx(math.pi / 2.0)
        assert config.background == (0.2, 0.7, 0.8)
        assert config.visibility == 1000.0

    def test_derived_properties(self):
        from tinyray.core.config import RenderConfig

        config = RenderConfig()
        assert config.aspect_ratio == pytest.approx(4.0 / 3.0)
        assert config.tan_half_fov == pytest.approx(1.0)
        assert config.pixel_count == 1024 * 768

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10)])
    def test_rejects_non_positive_size(self, width, height):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="dimensions"):
            RenderConfig(width=width, height=height)

    @pytest.mark.parametrize("fov", [0.0, -1.0, math.pi, 4.0])
    def test_rejects_fov_out_of_range(self, fov):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="Field of view"):
            RenderConfig(fov=fov)

    def test_rejects_bad_background(self):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="Background"):
            RenderConfig(background=(0.1, 0.2))

    @pytest.mark.parametrize("visibility", [0.0, -10.0, float("nan")])
    def test_rejects_non_positive_visibility(self, visibility):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="Visibility"):
            RenderConfig(visibility=visibility)

    def test_is_frozen(self):
        from tinyray.core.config import RenderConfig

        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderConfig().width = 10

    @pytest.mark.parametrize("width, height", [(64.5, 48), (64, 48.0), ("64", 48), (True, 48)])
    def test_rejects_non_integer_size(self, width, height):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="integers"):
            RenderConfig(width=width, height=height)

    @pytest.mark.parametrize("background", [(0.1, float("nan"), 0.3), (float("inf"), 0.0, 0.0)])
    def test_rejects_non_finite_background(self, background):
        from tinyray.core.config import RenderConfig

        with pytest.raises(ValueError, match="non-finite"):
            RenderConfig(background=background)

    def test_background_is_converted_to_floats(self):
        from tinyray.core.config import RenderConfig

        assert RenderConfig(background=[0, 1, 0]).background == (0.0, 1.0, 0.0)


class TestSetupLogging:
    """Tests for logger configuration."""

    def test_configures_named_logger(self):
        from tinyray.utils.logconfig import setup_logging

        logger = setup_logging("tinyray.test_stream", level=logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_repeated_setup_does_not_duplicate_handlers(self):
        from tinyray.utils.logconfig import setup_logging

        setup_logging("tinyray.test_repeat")
        logger = setup_logging("tinyray.test_repeat")
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        from tinyray.utils.logconfig import setup_logging

        log_file = tmp_path / "render.log"
        logger = setup_logging("tinyray.test_file", level=logging.INFO, log_file=log_file)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        text = log_file.read_text()
        assert "tinyray.test_file - INFO - hello" in text

    def test_repeated_setup_closes_old_file_handler(self, tmp_path):
        from tinyray.utils.logconfig import setup_logging

        logger = setup_logging("tinyray.test_reopen", log_file=tmp_path / "a.log")
        (old_file_handler,) = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        logger = setup_logging("tinyray.test_reopen")
        assert old_file_handler not in logger.handlers
        assert old_file_handler.stream is None
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
