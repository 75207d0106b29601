from .base import EditLensError


class DocumentReadError(EditLensError):
    """The document for a path could not be read (directory, missing, undecodable)."""

    def __init__(self, path: str, reason: str, *, missing: bool = False):
        super().__init__(f"Cannot read document '{path}': {reason}")
        self.path = path
        self.reason = reason
        self.missing = missing
