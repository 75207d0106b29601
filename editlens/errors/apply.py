from .base import EditLensError


class HunkMismatchError(EditLensError):
    """A hunk's old lines no longer match the document it is applied to."""
