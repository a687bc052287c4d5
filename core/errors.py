"""Custom errors with tracking context."""

from utils.timestamp import format_timestamp


class BaseIdError(Exception):
    """Base error carrying context and the time it was raised."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class MalformedIdError(BaseIdError, ValueError):
    """String cannot be decoded as an ID (too short or bad digits)."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.value = value


class ConfigurationError(BaseIdError):
    """Invalid configuration values."""

    def __init__(self, message, key=None, **kwargs):
        context = kwargs.pop("context", {})
        if key:
            context["key"] = key
        super().__init__(message, context=context, **kwargs)
