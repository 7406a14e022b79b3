class PaintShopError(ValueError):
    """Base exception for everything the paint shop solver raises."""
    pass

class MalformedInputError(PaintShopError):
    """Raised when a customer or color index is invalid."""
    pass

class NoSolutionError(PaintShopError):
    """Raised when no mix can satisfy every customer."""
    pass

class LockViolationError(PaintShopError):
    """Raised when a paint would overwrite a locked finish."""
    pass

class SearchBudgetExceeded(PaintShopError):
    """Raised when the pass budget or timeout runs out before a decision."""
    pass
