"""
Unit tests for the configuration system.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from atomicgen.utils.config import (
    TEMPLATE_DIR,
    GeneratorConfig,
    get_config,
    load_config,
    set_config,
)
from atomicgen.utils.exceptions import ConfigurationError


class TestDefaults:
    """Configuration without a file on disk."""

    def test_default_targets(self, default_config):
        names = [t.name for t in default_config.targets]
        assert names == ["source", "tests"]

        source, tests = default_config.targets
        assert source.kind == "source"
        assert source.destination == "Source/atomic.swift"
        assert source.normalize_deprecated is False
        assert Path(source.template) == TEMPLATE_DIR / "atomic-template.swift"

        assert tests.kind == "tests"
        assert tests.destination == "Tests/atomic-test.swift"
        assert tests.normalize_deprecated is True

    def test_bundled_templates_exist(self, default_config):
        for target in default_config.targets:
            assert Path(target.template).is_file()

    def test_default_sections(self, default_config):
        assert default_config.wrapper.name == "Atomic"
        assert default_config.wrapper.suffix == "A"
        assert default_config.suite.default_literal == "47"
        assert default_config.suite.bool_literal == "true"
        assert default_config.suite.string_delimiter == '"'
        assert default_config.suite.indent == " " * 8
        assert default_config.suite.max_resolution_passes == 16

    def test_global_config(self, default_config):
        assert get_config() is default_config

    def test_to_dict(self, default_config):
        data = default_config.to_dict()
        assert [t["name"] for t in data["targets"]] == ["source", "tests"]
        assert data["wrapper"] == {"name": "Atomic", "suffix": "A"}
        assert data["suite"]["max_resolution_passes"] == 16


class TestFileLoading:
    """Configuration read from YAML and JSON files."""

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "atomicgen.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {
                    "targets": [
                        {"name": "src", "template": "templates/a.swift", "destination": "out/a.swift"},
                        {"name": "tst", "template": "/abs/t.swift", "destination": "out/t.swift", "kind": "tests"},
                    ],
                    "suite": {"default_literal": "7"},
                }
            )
        )

        config = GeneratorConfig(str(config_file))

        src, tst = config.targets
        assert Path(src.template) == tmp_path.resolve() / "templates" / "a.swift"
        assert src.destination == "out/a.swift"
        assert src.kind == "source"
        assert src.normalize_deprecated is False
        assert tst.template == str(Path("/abs/t.swift"))
        assert tst.normalize_deprecated is True
        assert config.suite.default_literal == "7"
        assert config.suite.bool_literal == "true"

    def test_json_file(self, tmp_path):
        config_file = tmp_path / "atomicgen.json"
        config_file.write_text(json.dumps({"wrapper": {"name": "Locked", "suffix": "L"}}))

        config = load_config(str(config_file))

        assert config.wrapper.name == "Locked"
        assert config.wrapper.suffix == "L"
        assert [t.name for t in config.targets] == ["source", "tests"]

    def test_discovers_yaml_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "atomicgen.yaml").write_text("suite:\n  bool_literal: \"false\"\n")
        monkeypatch.chdir(tmp_path)

        config = GeneratorConfig()
        assert config.suite.bool_literal == "false"

    def test_empty_yaml_means_defaults(self, tmp_path):
        config_file = tmp_path / "atomicgen.yaml"
        config_file.write_text("")
        config = GeneratorConfig(str(config_file))
        assert len(config.targets) == 2

    def test_normalize_override(self, tmp_path):
        config_file = tmp_path / "c.json"
        config_file.write_text(
            json.dumps(
                {
                    "targets": [
                        {
                            "name": "src",
                            "template": "a.swift",
                            "destination": "a.swift",
                            "normalize_deprecated": True,
                        }
                    ]
                }
            )
        )
        config = GeneratorConfig(str(config_file))
        assert config.get_target("src").normalize_deprecated is True

    def test_env_overrides_log_level(self, tmp_path):
        config_file = tmp_path / "c.json"
        config_file.write_text(json.dumps({"logging": {"level": "WARNING"}}))

        with patch.dict("os.environ", {"ATOMICGEN_LOG_LEVEL": "DEBUG"}):
            config = GeneratorConfig(str(config_file))
        assert config.logging.level == "DEBUG"


class TestConfigurationErrors:
    """Invalid configuration is reported as ConfigurationError."""

    def _write(self, tmp_path, data):
        config_file = tmp_path / "c.json"
        config_file.write_text(json.dumps(data))
        return str(config_file)

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(str(tmp_path / "missing.yaml"))
        assert exc_info.value.config_file.endswith("missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "c.yaml"
        config_file.write_text("targets: [unclosed\n")
        with pytest.raises(ConfigurationError):
            GeneratorConfig(str(config_file))

    def test_malformed_json(self, tmp_path):
        config_file = tmp_path / "c.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigurationError):
            GeneratorConfig(str(config_file))

    def test_non_mapping_root(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, ["a", "b"]))

    def test_target_missing_field(self, tmp_path):
        path = self._write(tmp_path, {"targets": [{"name": "x", "template": "t"}]})
        with pytest.raises(ConfigurationError):
            GeneratorConfig(path)

    def test_unknown_kind(self, tmp_path):
        path = self._write(
            tmp_path, {"targets": [{"name": "x", "template": "t", "destination": "d", "kind": "docs"}]}
        )
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(path)
        assert "docs" in str(exc_info.value)

    def test_duplicate_target_name(self, tmp_path):
        entry = {"name": "x", "template": "t", "destination": "d"}
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, {"targets": [entry, entry]}))

    def test_invalid_pass_limit(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, {"suite": {"max_resolution_passes": 0}}))

    def test_empty_sections_use_defaults(self, tmp_path):
        config_file = tmp_path / "c.yaml"
        config_file.write_text("wrapper:\nsuite:\nlogging:\n")
        config = GeneratorConfig(str(config_file))
        assert config.wrapper.name == "Atomic"
        assert config.suite.max_resolution_passes == 16
        assert config.logging.enable_file_logging is False

    def test_non_numeric_pass_limit(self, tmp_path):
        config_file = tmp_path / "c.yaml"
        config_file.write_text("wrapper:\nsuite:\n  max_resolution_passes: lots\n")
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(str(config_file))
        assert "max_resolution_passes" in str(exc_info.value)

    def test_boolean_pass_limit(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, {"suite": {"max_resolution_passes": True}}))

    def test_numeric_string_pass_limit(self, tmp_path):
        config = GeneratorConfig(self._write(tmp_path, {"suite": {"max_resolution_passes": "4"}}))
        assert config.suite.max_resolution_passes == 4

    def test_non_mapping_section(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(self._write(tmp_path, {"wrapper": ["Atomic"]}))
        assert "wrapper" in str(exc_info.value)

    def test_non_list_targets(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, {"targets": {"name": "x"}}))

    def test_string_normalize_flag(self, tmp_path):
        entry = {"name": "x", "template": "t", "destination": "d", "normalize_deprecated": "false"}
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(self._write(tmp_path, {"targets": [entry]}))
        assert "normalize_deprecated" in str(exc_info.value)

    def test_boolean_normalize_flag(self, tmp_path):
        entry = {"name": "x", "template": "t", "destination": "d", "kind": "tests", "normalize_deprecated": False}
        config = GeneratorConfig(self._write(tmp_path, {"targets": [entry]}))
        assert config.targets[0].normalize_deprecated is False

    def test_string_file_logging_flag(self, tmp_path):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(self._write(tmp_path, {"logging": {"enable_file_logging": "yes"}}))

    def test_unknown_target_lookup(self, default_config):
        with pytest.raises(ConfigurationError) as exc_info:
            default_config.get_target("docs")
        assert "source, tests" in str(exc_info.value)


class TestGlobalConfig:
    """Module-level configuration accessors."""

    def teardown_method(self):
        set_config(None)

    def test_set_and_get(self, tmp_path):
        config_file = tmp_path / "c.json"
        config_file.write_text("{}")
        config = load_config(str(config_file))
        set_config(config)
        assert get_config() is config

    def test_lazily_created(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        set_config(None)
        config = get_config()
        assert isinstance(config, GeneratorConfig)
        assert get_config() is config
