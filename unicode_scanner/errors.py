class ScanError(Exception):
    """Base class for scanner usage errors"""


class InvalidPatternError(ScanError, TypeError):
    """Pattern is neither a compiled str pattern nor a compilable source"""


class PositionOutOfRangeError(ScanError, IndexError):
    """Requested scan pointer lies outside the text"""

    def __init__(self, message: str = "index out of range"):
        super().__init__(message)


class UnscanError(ScanError):
    """No match record to roll back to"""

    def __init__(self, message: str = "unscan failed: previous match record not exist"):
        super().__init__(message)
