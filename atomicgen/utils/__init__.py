"""
Utils package for atomicgen.

This module provides logging, configuration and the exception
hierarchy shared by the generators and the pipeline.
"""

from .exceptions import (
    AtomicGenError,
    TemplateReadError,
    TemplateRenderError,
    PlaceholderCycleError,
    DestinationWriteError,
    ConfigurationError,
)

from .config import (
    GeneratorConfig,
    TargetConfig,
    WrapperConfig,
    SuiteConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import get_logger, setup_logging, GeneratorLogger

__all__ = [
    # Exceptions
    "AtomicGenError",
    "TemplateReadError",
    "TemplateRenderError",
    "PlaceholderCycleError",
    "DestinationWriteError",
    "ConfigurationError",
    # Configuration
    "GeneratorConfig",
    "TargetConfig",
    "WrapperConfig",
    "SuiteConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",
    # Logging
    "get_logger",
    "setup_logging",
    "GeneratorLogger",
]
