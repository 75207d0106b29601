"""
Tests for editlens.highlight.words: byte-level change spans, display segments,
and old/new line pairing.
"""
import pytest

from editlens.highlight.words import aligned_old_lines, find_change, segment_line
from editlens.models.blocks import ChangedPair, ChangeSpan


# ---------------------------------------------------------------------------
# Tests for find_change
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("line", ["", "hello", "  indented", "multi 世界 bytes"])
def test_identical_lines_have_no_change(line):
    """Identical input is always None."""
    assert find_change(line, line) is None


@pytest.mark.parametrize(
    "old, new, expected",
    [
        ("hello world", "bye world", (0, 5, 0, 3)),
        ("hello beautiful world", "hello ugly world", (6, 15, 6, 10)),
        ("hello world", "hello there", (6, 11, 6, 11)),
        ("abc", "xyz", (0, 3, 0, 3)),
        ("hello world", "hello big world", (6, 6, 6, 10)),
        ("hello big world", "hello world", (6, 10, 6, 6)),
        ("", "hello", (0, 0, 0, 5)),
        ("hello", "", (0, 5, 0, 0)),
    ],
)
def test_find_change_spans(old, new, expected):
    """Prefix/suffix trimming yields the minimal differing range."""
    assert find_change(old, new) == ChangeSpan(*expected)


def test_prefix_and_suffix_do_not_overlap():
    """'aa' -> 'aaa' must not count the shared 'a' twice."""
    span = find_change("aa", "aaa")
    assert span == ChangeSpan(2, 2, 2, 3)


def test_offsets_are_bytes_not_code_points():
    """Multi-byte characters are measured in UTF-8 bytes."""
    span = find_change("hello 世界", "hello 你好")
    assert span is not None
    assert span.old_start == 6
    assert span.old_end == len("hello 世界".encode("utf-8"))
    assert span.new_end == len("hello 你好".encode("utf-8"))


def test_accepts_bytes():
    assert find_change(b"abc", b"abd") == ChangeSpan(2, 3, 2, 3)


@pytest.mark.parametrize(
    "a, b",
    [
        ("const y = 2;", "const y = 42;"),
        ("foo(bar)", "foo(baz, bar)"),
        ("xx", "x"),
        ("tab\there", "tab here"),
    ],
)
def test_outside_of_span_matches(a, b):
    """Bytes before and after the reported span are equal on both sides."""
    span = find_change(a, b)
    ab, bb = a.encode(), b.encode()
    assert ab[: span.old_start] == bb[: span.new_start]
    assert ab[span.old_end :] == bb[span.new_end :]


# ---------------------------------------------------------------------------
# Tests for segment_line
# ---------------------------------------------------------------------------


def test_segment_line_without_span_is_one_unchanged_run():
    assert segment_line("abc", None) == [("abc", False)]


def test_segment_line_new_side():
    span = find_change("hello world", "hello there")
    assert segment_line("hello there", span) == [("hello ", False), ("there", True)]


def test_segment_line_old_side_middle():
    span = find_change("hello beautiful world", "hello ugly world")
    assert segment_line("hello beautiful world", span, side="old") == [
        ("hello ", False),
        ("beautiful", True),
        (" world", False),
    ]


def test_segment_line_pure_insertion_on_old_side_keeps_line():
    span = find_change("hello world", "hello big world")
    assert segment_line("hello world", span, side="old") == [("hello ", False), ("world", False)]


def test_find_change_reports_whole_characters():
    """Characters sharing leading bytes are still reported whole."""
    # e-acute (c3 a9) and e-grave (c3 a8) share their first byte.
    assert find_change("caf\u00e9", "caf\u00e8") == ChangeSpan(3, 5, 3, 5)


def test_segment_line_widens_to_character_boundaries():
    """A span edge inside a multi-byte character is moved outside it."""
    span = ChangeSpan(old_start=4, old_end=5, new_start=4, new_end=5)
    assert segment_line("caf\u00e8", span) == [("caf", False), ("\u00e8", True)]


def test_segment_line_rejects_unknown_side():
    with pytest.raises(ValueError):
        segment_line("x", ChangeSpan(0, 1, 0, 1), side="left")


# ---------------------------------------------------------------------------
# Tests for aligned_old_lines
# ---------------------------------------------------------------------------


def test_aligned_old_lines_pairs_modifications_and_insertions():
    pairs = [
        ChangedPair(1, 1, "a", "A"),
        ChangedPair(old_idx=2, old_line="gone"),
        ChangedPair(new_idx=2, new_line="added"),
    ]
    assert aligned_old_lines(pairs) == ["a", None]


def test_aligned_old_lines_none_without_modifications():
    pairs = [ChangedPair(new_idx=1, new_line="x"), ChangedPair(old_idx=1, old_line="y")]
    assert aligned_old_lines(pairs) is None
