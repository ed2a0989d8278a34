"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Config validation and reference whites (validators)
    - Clamping policy (compute)
    - YAML loading (fs)
    - Unified logging (logging_config)

No module in utils/ may import from the conversion modules above it.

Convenience imports:
    from colour_delta.utils import validators, compute
    from colour_delta.utils.logging_config import setup_logging, get_logger
"""

from . import compute
from . import fs
from . import logging_config
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'compute',
    'fs',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
