"""Tests for host scoring."""

from fuzzier.models.candidate import Candidate
from fuzzier.services.fuzzy import UNSCORED, fuzzy_match, rank, scoring_query


class TestFuzzyMatch:
    """Score tiers."""

    def test_empty_query(self):
        assert fuzzy_match("", "anything") == (True, 0)

    def test_exact_beats_prefix(self):
        _, exact = fuzzy_match("helm", "helm")
        _, prefix = fuzzy_match("helm", "helm-mode")
        assert exact > prefix

    def test_initials_beat_substring(self):
        _, initials = fuzzy_match("el", "emacs-lisp-mode")
        _, contains = fuzzy_match("el", "xxelxx")
        assert initials > contains

    def test_shorter_initials_win(self):
        _, short = fuzzy_match("ff", "find-file")
        _, long = fuzzy_match("ff", "find-file-other-window")
        assert short > long

    def test_subsequence(self):
        matches, score = fuzzy_match("fb", "xfoobar1")
        assert matches
        assert 500 < score < 1000

    def test_no_match(self):
        assert fuzzy_match("zz", "find-file") == (False, 0)

    def test_case_sensitive(self):
        assert fuzzy_match("FF", "find-file", case_sensitive=True) == (False, 0)
        assert fuzzy_match("FF", "find-file")[0]


class TestRank:
    """rank()."""

    def test_orders_by_score(self):
        candidates = [Candidate.from_text(t) for t in ["xfoobar1", "foo-bar", "fb"]]
        ranked = rank("fb", candidates)
        assert [s.candidate.id for s in ranked] == ["fb", "foo-bar", "xfoobar1"]

    def test_drops_non_matches(self):
        candidates = [Candidate.from_text(t) for t in ["abc", "xyz"]]
        assert [s.candidate.id for s in rank("ab", candidates)] == ["abc"]

    def test_empty_query_keeps_order(self):
        candidates = [Candidate.from_text(t) for t in ["b", "a"]]
        assert [s.candidate.id for s in rank("", candidates)] == ["b", "a"]

    def test_custom_target(self):
        candidates = [Candidate(id="1", display="zzz", value="find-file")]
        ranked = rank("ff", candidates, target=lambda c: c.value)
        assert len(ranked) == 1

    def test_trailing_end_marker_ignored(self):
        candidates = [Candidate.from_text("foo-x")]
        assert [s.candidate.id for s in rank("fx$", candidates)] == ["foo-x"]

    def test_keep_unscored_ranks_last(self):
        candidates = [Candidate.from_text(t) for t in ["xyz", "abc"]]
        ranked = rank("ab", candidates, keep_unscored=True)
        assert [s.candidate.id for s in ranked] == ["abc", "xyz"]
        assert ranked[-1].score == UNSCORED


def test_scoring_query_keeps_lone_marker():
    assert scoring_query("$") == "$"
    assert scoring_query("ab$") == "ab"
    assert scoring_query("a$b") == "a$b"
