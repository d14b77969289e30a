class ConfigurationError(ValueError):
    """Raised when the movement configuration is rejected at startup."""
    pass
