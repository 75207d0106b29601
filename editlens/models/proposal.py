# editlens/models/proposal.py
"""
Boundary model for the edit proposals an agent sends.

The agent protocol delivers loosely-typed JSON; this is the only place its
shape is checked. Everything downstream works with a validated EditProposal.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ProposalError

TextOrLines = Union[str, List[str]]


class EditProposal(BaseModel):
    """A proposed `(path, old_text, new_text, replace_all)` edit."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    path: str = Field(validation_alias=AliasChoices("path", "file_path"))
    old_text: Optional[TextOrLines] = Field(
        default=None, validation_alias=AliasChoices("old_text", "old_string", "oldText")
    )
    new_text: TextOrLines = Field(
        validation_alias=AliasChoices("new_text", "new_string", "newText")
    )
    replace_all: bool = False

    @field_validator("path")
    @classmethod
    def _path_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path must not be empty")
        return v

    @field_validator("replace_all", mode="before")
    @classmethod
    def _null_replace_all(cls, v: Any) -> Any:
        # Agents send an explicit null when the flag is unset.
        return False if v is None else v

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "EditProposal":
        """Validate a raw agent payload, raising ProposalError on a bad shape."""
        if not isinstance(raw, Mapping):
            raise ProposalError(f"Edit proposal must be a mapping, got {type(raw).__name__}")
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as e:
            raise ProposalError(f"Malformed edit proposal: {e}") from e


def has_diff_content(raw: Any) -> bool:
    """True when a raw payload names a file and carries new text (old text may be absent)."""
    if not isinstance(raw, Mapping):
        return False
    path = raw.get("file_path", raw.get("path"))
    new_text = raw.get("new_string", raw.get("new_text", raw.get("newText")))
    return path is not None and new_text is not None
