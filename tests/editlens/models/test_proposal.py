import pytest

from editlens.errors import ProposalError
from editlens.models.proposal import EditProposal, has_diff_content


def test_from_raw_agent_keys():
    p = EditProposal.from_raw(
        {"file_path": "a.py", "old_string": "x", "new_string": "y", "replace_all": True}
    )
    assert p.path == "a.py"
    assert p.old_text == "x"
    assert p.new_text == "y"
    assert p.replace_all is True


def test_from_raw_field_names_and_defaults():
    p = EditProposal.from_raw({"path": "a.py", "new_text": "y"})
    assert p.old_text is None
    assert p.replace_all is False


def test_null_replace_all_means_false():
    p = EditProposal.from_raw({"path": "a.py", "new_text": "y", "replace_all": None})
    assert p.replace_all is False


def test_extra_keys_are_ignored():
    p = EditProposal.from_raw({"path": "a.py", "newText": "y", "description": "why"})
    assert p.new_text == "y"


def test_lines_accepted_as_text():
    p = EditProposal.from_raw({"path": "a.py", "new_text": ["a", "b"]})
    assert p.new_text == ["a", "b"]


@pytest.mark.parametrize(
    "raw",
    [
        {"file_path": "a.py"},
        {"new_string": "y"},
        {"file_path": "   ", "new_string": "y"},
        {"file_path": "a.py", "new_string": 3},
        ["not", "a", "mapping"],
    ],
)
def test_malformed_raises_proposal_error(raw):
    with pytest.raises(ProposalError):
        EditProposal.from_raw(raw)


def test_has_diff_content():
    assert has_diff_content({"file_path": "a", "new_string": ""})
    assert has_diff_content({"file_path": "a", "old_string": None, "new_string": "x"})
    assert not has_diff_content({"file_path": "a"})
    assert not has_diff_content({"new_string": "x"})
    assert not has_diff_content(None)
