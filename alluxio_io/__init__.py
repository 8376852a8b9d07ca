"""TestAlluxioIO: разбор конфигурации теста ввода-вывода"""

__version__ = "0.1.0"

from .config import TestConfig
from .errors import (
    ConfigError,
    InvalidEnumValue,
    InvalidNumber,
    InvalidSize,
    MissingCommand,
    MissingRequiredOption,
    UnknownOption,
)
from .modes import TestMode, ReadBehavior, WriteBehavior, Compression
from .resolver import Resolution, ResolveStatus, resolve, parse_and_run
from .sizes import size_to_bytes

__all__ = [
    'TestConfig',
    'TestMode',
    'ReadBehavior',
    'WriteBehavior',
    'Compression',
    'Resolution',
    'ResolveStatus',
    'resolve',
    'parse_and_run',
    'size_to_bytes',
    'ConfigError',
    'MissingCommand',
    'MissingRequiredOption',
    'UnknownOption',
    'InvalidSize',
    'InvalidEnumValue',
    'InvalidNumber',
]
