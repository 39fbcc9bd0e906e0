class ModelError(ValueError):
    """Base class for invalid input to the emotion likelihood model."""
    pass


class ConfigError(ModelError):
    """Raised for degenerate thresholds, malformed totals or bad overrides."""
    pass


class AllocationError(ModelError):
    """Raised when a proposed allocation is outside 0 <= x_i <= q_i."""
    pass


class CandidateLimitError(ModelError):
    """Raised when the allocation space is too large to enumerate."""
    pass
