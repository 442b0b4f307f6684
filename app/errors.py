# app/errors.py
"""Error kinds surfaced to API callers as ``{"success": false, "message": ...}``."""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or malformed required input; the caller can fix it."""

    status_code = 400


class InvalidInput(ServiceError):
    """A value was present but could not be parsed (e.g. a date)."""

    status_code = 400


class NotFound(ServiceError):
    status_code = 404


class SlotConflict(ServiceError):
    status_code = 409


class UnsupportedProvider(ServiceError):
    status_code = 400

    def __init__(self, provider: str):
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class GenerationError(ServiceError):
    """The provider call failed: network, non-2xx status or an unusable body."""

    status_code = 502

    def __init__(self, provider: str, cause: Exception):
        super().__init__(f"Video generation failed with {provider}: {cause}")
        self.provider = provider
        self.cause = cause
