from .base import EditLensError


class ConfigError(EditLensError, ValueError):
    """An option passed to PreviewConfig is unknown or has the wrong value."""
