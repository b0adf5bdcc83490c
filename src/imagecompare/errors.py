"""Custom exceptions used across imagecompare."""

__all__ = ["InvalidConfigError"]


class InvalidConfigError(ValueError):
    """Raised when a comparison configuration holds out-of-range values."""

    pass
