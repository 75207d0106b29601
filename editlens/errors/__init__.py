from .apply import HunkMismatchError
from .base import EditLensError
from .config import ConfigError
from .document import DocumentReadError
from .proposal import ProposalError

__all__ = ["EditLensError", "ConfigError", "DocumentReadError", "HunkMismatchError", "ProposalError"]
