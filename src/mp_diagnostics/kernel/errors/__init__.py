"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── InvalidArgumentError   (usage.py; also a ValueError)
    │   └── ArgumentError
    ├── InvalidStateError      (usage.py; also a RuntimeError)
    └── ConfigError            (mp_diagnostics.config.validation)
        └── InvalidSettingValueError
"""

from mp_diagnostics.kernel.errors.base import BaseError
from mp_diagnostics.kernel.errors.usage import (
    ArgumentError,
    InvalidArgumentError,
    InvalidStateError,
)

__all__ = [
    "ArgumentError",
    "BaseError",
    "InvalidArgumentError",
    "InvalidStateError",
]
