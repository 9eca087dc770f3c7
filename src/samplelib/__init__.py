"""samplelib: stateless calculator and string services behind injected capabilities.

Typical use::

    from samplelib import create_default_config_provider, create_library_service

    lib = create_library_service(create_default_config_provider())
    result = lib.get_calculator().divide(10, 4)
    if result.success:
        print(result.data.result)
"""

from __future__ import annotations

from samplelib.config.models import LibConfig
from samplelib.infrastructure.config_provider import DefaultConfigProvider
from samplelib.infrastructure.version import get_library_version
from samplelib.services.calculator import CalculatorService
from samplelib.services.capabilities import (
    CacheAdapter,
    ConfigProvider,
    LoggerAdapter,
    NullLogger,
)
from samplelib.services.config import ConfigService
from samplelib.services.library import (
    LibraryService,
    create_default_config_provider,
    create_library_service,
)
from samplelib.services.result import ErrorCode, Failure, Result, Success, fail, ok
from samplelib.services.strings import StringService

__version__ = get_library_version()

__all__ = [
    "CacheAdapter",
    "CalculatorService",
    "ConfigProvider",
    "ConfigService",
    "DefaultConfigProvider",
    "ErrorCode",
    "Failure",
    "LibConfig",
    "LibraryService",
    "LoggerAdapter",
    "NullLogger",
    "Result",
    "StringService",
    "Success",
    "__version__",
    "create_default_config_provider",
    "create_library_service",
    "fail",
    "get_library_version",
    "ok",
]
