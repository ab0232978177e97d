"""Tests for configuration."""

import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from skaitvardis.config import ConverterConfig, NormalizerConfig, load_config
from skaitvardis.exceptions import ConfigurationError


class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_default_config(self) -> None:
        assert not ConverterConfig().elide_count_of_one

    def test_frozen(self) -> None:
        config = ConverterConfig()
        with pytest.raises(ValidationError):
            config.elide_count_of_one = True


class TestNormalizerConfig:
    """Tests for NormalizerConfig."""

    def test_default_config(self) -> None:
        config = NormalizerConfig()
        assert config.convert_numbers
        assert config.remove_extra_spaces
        assert not config.lowercase
        assert config.custom_replacements == {}
        assert config.converter == ConverterConfig()

    def test_save_and_load(self) -> None:
        config = NormalizerConfig(
            lowercase=True,
            custom_replacements={"€": " eurų"},
            converter=ConverterConfig(elide_count_of_one=True),
        )

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.json"
            config.save(path)

            assert "eurų" in path.read_text(encoding="utf-8")
            loaded = NormalizerConfig.load(path)
            assert loaded == config

    def test_load_from_dict(self) -> None:
        data = {"convert_numbers": False, "converter": {"elide_count_of_one": True}}
        config = NormalizerConfig.model_validate(data)
        assert not config.convert_numbers
        assert config.converter.elide_count_of_one


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            NormalizerConfig().save(path)

            loaded = load_config(str(path))
            assert isinstance(loaded, NormalizerConfig)

    def test_load_nonexistent_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            load_config(Path("/nonexistent/path.json"))

    def test_load_malformed_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text("{not json", encoding="utf-8")

            with pytest.raises(ConfigurationError):
                load_config(path)

    def test_load_invalid_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text(json.dumps({"lowercase": "maybe"}), encoding="utf-8")

            with pytest.raises(ConfigurationError):
                load_config(path)
