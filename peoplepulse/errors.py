"""Exception types raised by the People Pulse engines."""


class PulseInputError(TypeError):
    """Raised when a calculator receives input of the wrong type or shape."""


class WeightConfigError(ValueError):
    """Raised when a weight table names unknown keys or carries negative weights."""
