class ConfigurationError(ValueError):
    """Raised when an estimator or driver is constructed with invalid settings."""
