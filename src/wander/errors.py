class ConfigurationError(ValueError):
    """Raised when a wander configuration violates its invariants."""
