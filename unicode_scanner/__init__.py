from .describe import describe
from .errors import (
    InvalidPatternError,
    PositionOutOfRangeError,
    ScanError,
    UnscanError,
)
from .scanner import ScannerCore

__version__ = "1.0.0"

__all__ = [
    "ScannerCore",
    "describe",
    "ScanError",
    "InvalidPatternError",
    "PositionOutOfRangeError",
    "UnscanError",
]
