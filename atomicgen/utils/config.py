"""
Configuration System for atomicgen.

This module provides a single configuration object describing which
(template, destination) pairs to generate and the knobs shared by the
generators. Configuration is read from a YAML or JSON file; anything
the file leaves out falls back to the built-in defaults.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

TARGET_KINDS = ("source", "tests")


@dataclass
class TargetConfig:
    """One (template, destination) pair."""

    name: str
    template: str
    destination: str
    kind: str = "source"
    normalize_deprecated: bool = False


@dataclass
class WrapperConfig:
    """Generic wrapper syntax rewritten in generated output."""

    name: str = "Atomic"
    suffix: str = "A"


@dataclass
class SuiteConfig:
    """Literals and limits used by the test-suite pass."""

    default_literal: str = "47"
    bool_literal: str = "true"
    string_delimiter: str = '"'
    indent: str = "        "
    max_resolution_passes: int = 16


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "atomicgen.log"


def default_targets() -> List[TargetConfig]:
    """Targets generated when no configuration file names any."""
    return [
        TargetConfig(
            name="source",
            template=str(TEMPLATE_DIR / "atomic-template.swift"),
            destination="Source/atomic.swift",
            kind="source",
        ),
        TargetConfig(
            name="tests",
            template=str(TEMPLATE_DIR / "atomic-test-template.swift"),
            destination="Tests/atomic-test.swift",
            kind="tests",
            normalize_deprecated=True,
        ),
    ]


class GeneratorConfig:
    """
    Unified configuration manager for atomicgen.

    Template paths in a configuration file are resolved relative to the
    file's directory. Destinations stay relative; the pipeline resolves
    them against the output root.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, looks for
                atomicgen.yaml then atomicgen.json in the working directory.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._explicit = config_file is not None
        self._config_data = self._load_config()

        self.targets = self._create_targets()
        self.wrapper = self._create_wrapper_config()
        self.suite = self._create_suite_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        yaml_config = Path.cwd() / "atomicgen.yaml"
        json_config = Path.cwd() / "atomicgen.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit:
                raise ConfigurationError("Configuration file not found", str(self.config_file))
            logger.debug(f"No configuration file at {self.config_file}, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}", str(self.config_file)) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration root must be a mapping", str(self.config_file))

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        """Top-level mapping section; absent or empty reads as {}."""
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Section '{name}' must be a mapping", str(self.config_file))
        return data

    def _flag(self, data: Dict[str, Any], key: str, default: bool) -> bool:
        value = data.get(key, default)
        if not isinstance(value, bool):
            raise ConfigurationError(f"'{key}' must be true or false, got {value!r}", str(self.config_file))
        return value

    def _int(self, data: Dict[str, Any], key: str, default: int) -> int:
        value = data.get(key, default)
        try:
            if isinstance(value, bool):
                raise TypeError(value)
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"'{key}' must be an integer, got {value!r}", str(self.config_file)) from e

    def _create_targets(self) -> List[TargetConfig]:
        """Create target list from loaded data."""
        targets_data = self._config_data.get("targets")
        if not targets_data:
            return default_targets()
        if not isinstance(targets_data, list):
            raise ConfigurationError("'targets' must be a list", str(self.config_file))

        base_dir = self.config_file.resolve().parent
        targets = []
        seen = set()
        for entry in targets_data:
            try:
                name = str(entry["name"])
                template = str(entry["template"])
                destination = str(entry["destination"])
            except (KeyError, TypeError) as e:
                raise ConfigurationError(f"Invalid target entry {entry!r}: missing {e}", str(self.config_file)) from e

            kind = str(entry.get("kind", "source"))
            if kind not in TARGET_KINDS:
                raise ConfigurationError(f"Unknown target kind '{kind}' for target '{name}'", str(self.config_file))
            if name in seen:
                raise ConfigurationError(f"Duplicate target name '{name}'", str(self.config_file))
            seen.add(name)

            template_path = Path(template)
            if not template_path.is_absolute():
                template_path = base_dir / template_path

            targets.append(
                TargetConfig(
                    name=name,
                    template=str(template_path),
                    destination=destination,
                    kind=kind,
                    normalize_deprecated=self._flag(entry, "normalize_deprecated", kind == "tests"),
                )
            )
        return targets

    def _create_wrapper_config(self) -> WrapperConfig:
        """Create wrapper configuration from loaded data."""
        wrapper_data = self._section("wrapper")

        return WrapperConfig(
            name=wrapper_data.get("name", "Atomic"),
            suffix=wrapper_data.get("suffix", "A"),
        )

    def _create_suite_config(self) -> SuiteConfig:
        """Create test-suite configuration from loaded data."""
        suite_data = self._section("suite")

        config = SuiteConfig(
            default_literal=str(suite_data.get("default_literal", "47")),
            bool_literal=str(suite_data.get("bool_literal", "true")),
            string_delimiter=str(suite_data.get("string_delimiter", '"')),
            indent=suite_data.get("indent", "        "),
            max_resolution_passes=self._int(suite_data, "max_resolution_passes", 16),
        )
        if config.max_resolution_passes < 1:
            raise ConfigurationError("max_resolution_passes must be at least 1", str(self.config_file))
        return config

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=os.getenv("ATOMICGEN_LOG_LEVEL", log_data.get("level", "INFO")),
            enable_file_logging=self._flag(log_data, "enable_file_logging", False),
            log_file=log_data.get("log_file", "atomicgen.log"),
        )

    def get_target(self, name: str) -> TargetConfig:
        """Look up a target by name."""
        for target in self.targets:
            if target.name == name:
                return target
        known = ", ".join(t.name for t in self.targets)
        raise ConfigurationError(f"Unknown target '{name}' (known: {known})")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the configuration to a plain dictionary."""
        return {
            "targets": [
                {
                    "name": t.name,
                    "template": t.template,
                    "destination": t.destination,
                    "kind": t.kind,
                    "normalize_deprecated": t.normalize_deprecated,
                }
                for t in self.targets
            ],
            "wrapper": {"name": self.wrapper.name, "suffix": self.wrapper.suffix},
            "suite": {
                "default_literal": self.suite.default_literal,
                "bool_literal": self.suite.bool_literal,
                "string_delimiter": self.suite.string_delimiter,
                "indent": self.suite.indent,
                "max_resolution_passes": self.suite.max_resolution_passes,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }


# Global configuration instance
_global_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = GeneratorConfig()
    return _global_config


def set_config(config: GeneratorConfig) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> GeneratorConfig:
    """Load configuration from a specific file."""
    return GeneratorConfig(config_file)
