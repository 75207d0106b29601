from .base import EditLensError


class ProposalError(EditLensError):
    """The raw edit proposal from the agent does not have the expected shape."""
