class EditLensError(Exception):
    """Base class for every error raised by editlens."""
