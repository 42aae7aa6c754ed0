"""Exceptions raised across the application."""


class LangBuilderError(Exception):
    """Base class for recoverable application errors."""
    pass


class ConfigurationError(LangBuilderError):
    """AI action attempted without an API key."""
    pass


class ValidationError(LangBuilderError):
    """User input rejected before any remote call."""
    pass


class BusyError(LangBuilderError):
    """Another AI request is still in flight."""
    pass


class GatewayError(LangBuilderError):
    """The AI service failed or returned an unusable payload."""
    pass
