"""Unit tests for configuration management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from depverify.config import (
    CONFIG_FILE_NAME,
    LoggingConfig,
    LogLevel,
    VerifyConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestVerifyConfig:
    """Test VerifyConfig model."""

    def test_defaults(self):
        config = VerifyConfig()
        assert config.file_types == frozenset({"jar"})
        assert config.directories == []
        assert config.distributions == []
        assert config.ignore_files == []
        assert config.verbose is False
        assert config.logging.level == LogLevel.INFO.value

    def test_config_from_camel_case_dict(self):
        config = VerifyConfig(**{
            "fileTypes": ["jar", "war"],
            "directories": ["/opt/app/lib"],
            "distributions": ["/tmp/dist.zip"],
            "ignoreFiles": ["**/junit-*.jar"],
            "verbose": True,
        })
        assert config.file_types == frozenset({"jar", "war"})
        assert config.directories == [Path("/opt/app/lib")]
        assert config.distributions == [Path("/tmp/dist.zip")]
        assert config.ignore_files == ["**/junit-*.jar"]
        assert config.verbose is True

    def test_config_from_snake_case_names(self):
        config = VerifyConfig(file_types={"ear"}, ignore_files=["x"])
        assert config.file_types == frozenset({"ear"})
        assert config.ignore_files == ["x"]

    def test_null_values_fall_back_to_defaults(self):
        config = VerifyConfig.model_validate({
            "fileTypes": None,
            "directories": None,
            "distributions": None,
            "ignoreFiles": None,
        })
        assert config.file_types == frozenset({"jar"})
        assert config.directories == []
        assert config.distributions == []
        assert config.ignore_files == []

    def test_explicit_empty_file_types_kept(self):
        config = VerifyConfig(fileTypes=[])
        assert config.file_types == frozenset()

    def test_leading_dot_in_file_type_is_stripped(self):
        config = VerifyConfig(fileTypes=[".jar", "war"])
        assert config.file_types == frozenset({"jar", "war"})

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            VerifyConfig(unknownOption=True)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            VerifyConfig(logging={"level": "loud"})

    def test_config_is_immutable(self):
        config = VerifyConfig()
        with pytest.raises(ValidationError):
            config.verbose = True

    def test_logging_config(self):
        assert LoggingConfig(level="debug").level == "debug"


class TestMergedConfig:
    """Test command line overrides."""

    def test_merged_applies_non_none_overrides(self):
        base = VerifyConfig(directories=["/a"], ignoreFiles=["*.txt"])
        merged = base.merged(directories=[Path("/b")], ignore_files=None, verbose=True)

        assert merged.directories == [Path("/b")]
        assert merged.ignore_files == ["*.txt"]
        assert merged.verbose is True
        assert base.directories == [Path("/a")]

    def test_merged_without_overrides_returns_same_config(self):
        base = VerifyConfig()
        assert base.merged(directories=None) is base

    def test_merged_normalizes_file_types(self):
        merged = VerifyConfig().merged(file_types=[".war"])
        assert merged.file_types == frozenset({"war"})


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({
            "fileTypes": ["jar"],
            "directories": ["lib"],
            "distributions": ["/abs/dist.zip"],
            "ignoreFiles": ["**/test-*.jar"],
        }), encoding="utf-8")

        config = load_config(config_file)

        assert config.directories == [tmp_path.resolve() / "lib"]
        assert config.distributions == [Path("/abs/dist.zip")]
        assert config.ignore_files == ["**/test-*.jar"]

    def test_load_config_explicit_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.json")

    def test_load_config_invalid_json(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{ not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(config_file)

    def test_load_config_not_an_object(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            load_config(config_file)

    def test_load_config_invalid_values(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"verbose": "sometimes"}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_find_config_file_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_load_config_searches_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILE_NAME).write_text(json.dumps({"verbose": True}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config().verbose is True

    def test_create_default_config(self):
        assert create_default_config() == VerifyConfig()
