"""Error types shared across services and the HTTP layer."""


class BrickPressError(Exception):
    """Base class for application errors with a user-facing message."""

    status_code = 500


class ValidationError(BrickPressError):
    """Caller input is missing or invalid."""

    status_code = 400


class ConfigurationError(BrickPressError):
    """A required credential or setting is not configured."""

    status_code = 500


class GenerationError(BrickPressError):
    """The upstream image model failed or returned no image."""

    status_code = 502


class PersistenceError(BrickPressError):
    """Storing a blob or generation record failed."""

    status_code = 500
