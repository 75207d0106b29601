"""
Tests for editlens.locate.matcher.find_all_matches: exact runs, the single-line
substring fallback, and the opt-in loose tier.
"""
from editlens.locate.matcher import _eq_loose, _scan_runs, find_all_matches
from editlens.models.blocks import Match


DOC = [
    "def greet(name):",
    "    print('hello')",
    "    return name",
    "",
    "def part():",
    "    print('hello')",
    "    return None",
]


# ---------------------------------------------------------------------------
# Tests for _scan_runs / _eq_loose
# ---------------------------------------------------------------------------


def test_scan_runs_is_non_overlapping():
    """After a hit the scan resumes past the consumed lines."""
    assert _scan_runs(["a", "a", "a", "a", "a"], ["a", "a"]) == [0, 2]


def test_scan_runs_empty_block():
    assert _scan_runs(["a"], []) == []


def test_scan_runs_block_longer_than_target():
    assert _scan_runs(["a"], ["a", "b"]) == []


def test_eq_loose():
    assert _eq_loose("  x = 1", "x = 1\t")
    assert not _eq_loose("x = 1", "x = 2")


# ---------------------------------------------------------------------------
# Exact tier
# ---------------------------------------------------------------------------


def test_single_exact_match():
    matches = find_all_matches(DOC, ["def greet(name):"])
    assert matches == [Match(start_line=1, end_line=1)]


def test_multi_line_exact_matches_in_order():
    """Every occurrence is found, ascending by line."""
    matches = find_all_matches(DOC, ["    print('hello')"])
    assert [(m.start_line, m.end_line) for m in matches] == [(2, 2), (6, 6)]
    assert all(m.strategy == "exact" for m in matches)


def test_multi_line_pattern_span():
    matches = find_all_matches(DOC, ["    print('hello')", "    return None"])
    assert [(m.start_line, m.end_line) for m in matches] == [(6, 7)]


def test_exact_preferred_over_substring():
    """An exact hit suppresses the substring tier even when it would match more lines."""
    doc = ["x = 1", "y = x = 1"]
    matches = find_all_matches(doc, ["x = 1"], ["x = 2"])
    assert matches == [Match(1, 1)]


def test_matching_is_deterministic():
    first = find_all_matches(DOC, ["    print('hello')"])
    second = find_all_matches(DOC, ["    print('hello')"])
    assert first == second


def test_matches_are_disjoint_and_sorted():
    doc = ["a", "b"] * 5
    matches = find_all_matches(doc, ["a", "b", "a"])
    spans = [(m.start_line, m.end_line) for m in matches]
    assert spans == sorted(spans)
    for (s1, e1), (s2, _e2) in zip(spans, spans[1:]):
        assert e1 < s2


# ---------------------------------------------------------------------------
# Substring tier
# ---------------------------------------------------------------------------


def test_substring_fallback_one_match_per_line():
    doc = ["a = foo(1) + foo(2)", "b = 3", "c = foo(4)"]
    matches = find_all_matches(doc, ["foo("], ["bar("])
    assert [(m.start_line, m.end_line, m.strategy) for m in matches] == [
        (1, 1, "substring"),
        (3, 3, "substring"),
    ]
    # First occurrence per line only.
    assert matches[0].replacement == "a = bar(1) + foo(2)"
    assert matches[1].replacement == "c = bar(4)"


def test_substring_is_literal_not_a_pattern():
    doc = ["total = a.b*c", "total = aXb*c"]
    matches = find_all_matches(doc, ["a.b*"], ["a.d*"])
    assert [m.start_line for m in matches] == [1]
    assert matches[0].replacement == "total = a.d*c"


def test_substring_needs_single_line_replacement():
    doc = ["prefix value suffix"]
    assert find_all_matches(doc, ["value"], ["one", "two"]) == []


def test_substring_needs_replacement_lines():
    assert find_all_matches(["prefix value suffix"], ["value"]) == []


def test_substring_skips_empty_search():
    assert find_all_matches(["a", "b"], [""], ["x"]) == []


# ---------------------------------------------------------------------------
# Not located / loose tier
# ---------------------------------------------------------------------------


def test_not_located_is_empty_list():
    assert find_all_matches(DOC, ["nothing", "here"], ["x"]) == []


def test_empty_document():
    assert find_all_matches([], ["a"], ["b"]) == []


def test_loose_tier_is_opt_in():
    doc = ["    if x:", "        run()"]
    pattern = ["if x:", "    run()"]
    assert find_all_matches(doc, pattern, ["y"]) == []
    matches = find_all_matches(doc, pattern, ["y"], loose=True)
    assert matches == [Match(1, 2, strategy="loose")]


def test_loose_tier_runs_after_substring():
    doc = ["  value = 1  "]
    matches = find_all_matches(doc, ["value = 1"], ["value = 2"], loose=True)
    assert matches[0].strategy == "substring"
