class SimplexRefineError(Exception):
    """Base class for all errors raised by simplex_refine."""


class InvalidConfiguration(SimplexRefineError, ValueError):
    """Raised when an algorithm is constructed with unusable parameters."""


class UnsupportedProblem(SimplexRefineError, ValueError):
    """Raised when a problem cannot be handled by the algorithm."""


class InvalidProblem(SimplexRefineError, ValueError):
    """Raised when a problem definition is malformed."""


class InvalidIndex(SimplexRefineError, IndexError):
    """Raised when an individual index is out of range."""


class OutOfMemory(SimplexRefineError, MemoryError):
    """Raised when the search state cannot be allocated."""
