class PredictionError(Exception):
    """Base exception for all congestion prediction errors."""
    pass

class WeatherProviderError(PredictionError):
    """Raised when the upstream weather provider cannot deliver a usable payload."""
    pass

class ConfigurationError(PredictionError):
    """Raised when configuration is invalid."""
    pass
