import pytest

from lfm.match.scoring import (
    EMPTY_QUERY_SCORE,
    MatchResult,
    ScoringConfig,
    SearchPrecision,
    match,
)
from lfm.utils.normalization import is_word_boundary


SAMPLE_PAIRS = [
    ("gcm", "Git Commit"),
    ("GCM", "gcm tool"),
    ("open settings", "Open Settings Dialog"),
    ("open settings", "xopenyzsettingsdialog"),
    ("set", "Reset Settings"),
    ("10", "Windows 10"),
    ("école", "ÉCOLE normale"),
    ("a b c", "a-b-c"),
    ("zz", "pizza"),
    ("xyz", "abc"),
    ("settings open", "Open Settings"),
]

UNICODE_PAIRS = [
    ("straße", "Straße"),
    ("strasse", "Straße"),
    ("ı", "ı"),
    ("ﬁle", "ﬁle"),
    ("file", "ﬁle"),
    ("İstanbul", "İSTANBUL"),
    ("σοφια", "ΣΟΦΙΑ"),
    ("ﬀ", "ff"),
]


class TestTrivialInputs:
    """Empty and degenerate inputs never raise."""

    @pytest.mark.parametrize("candidate", ["anything", "", "  "])
    def test_empty_query_matches_everything(self, candidate):
        result = match("", candidate)
        assert result.success
        assert result.score == EMPTY_QUERY_SCORE
        assert result.matched_positions == ()

    def test_whitespace_query_is_empty(self):
        assert match(" \t\n", "anything") == MatchResult(success=True, score=EMPTY_QUERY_SCORE)

    @pytest.mark.parametrize("query", ["a", "abc", "open settings"])
    def test_empty_candidate_never_matches(self, query):
        result = match(query, "")
        assert not result.success
        assert result.score == 0
        assert result.matched_positions == ()

    def test_no_match(self):
        result = match("xyz", "abc")
        assert result == MatchResult(success=False, score=0, matched_positions=())

    def test_query_longer_than_candidate(self):
        assert not match("abcdef", "abc").success

    def test_very_long_inputs(self):
        candidate = "ab" * 5000
        result = match("a" * 50, candidate)
        assert result.success
        assert len(result.matched_positions) == 50
        assert not match("c", candidate).success


class TestPositions:
    """Matched positions are increasing, in bounds and one per query char."""

    @pytest.mark.parametrize("query,candidate", SAMPLE_PAIRS + UNICODE_PAIRS)
    def test_position_invariants(self, query, candidate):
        result = match(query, candidate)
        if not result.success:
            assert result.matched_positions == ()
            assert result.score == 0
            return
        positions = result.matched_positions
        assert 1 <= len(positions) <= len("".join(query.split()))
        assert all(0 <= p < len(candidate) for p in positions)
        assert all(a < b for a, b in zip(positions, positions[1:]))

    def test_initials(self):
        result = match("gcm", "Git Commit")
        assert result.success
        assert result.matched_positions == (0, 4, 6)
        assert is_word_boundary("Git Commit", 0)
        assert is_word_boundary("Git Commit", 4)

    def test_terms_must_appear_in_order(self):
        assert match("open settings", "Open Settings").success
        assert not match("settings open", "Open Settings").success

    def test_later_term_starts_after_earlier_term(self):
        result = match("a a", "aa")
        assert result.matched_positions == (0, 1)
        assert not match("a a", "a").success

    def test_greedy_leftmost_placement(self):
        """The leftmost subsequence is kept even when a tighter one exists."""
        result = match("ab", "a-ab")
        assert result.matched_positions == (0, 3)


class TestCaseHandling:
    @pytest.mark.parametrize("query,candidate", SAMPLE_PAIRS + UNICODE_PAIRS)
    def test_success_is_case_insensitive(self, query, candidate):
        assert match(query, candidate).success == match(query.upper(), candidate).success
        assert match(query, candidate).success == match(query.lower(), candidate).success

    def test_case_match_bonus_never_decreases_score(self):
        exact = match("gcm", "gcm tool")
        mixed = match("GCM", "gcm tool")
        assert mixed.success
        assert exact.score >= mixed.score
        assert exact.matched_positions == mixed.matched_positions

    def test_unicode_case_folding(self):
        assert match("école", "ÉCOLE").success
        assert match("σοφια", "ΣΟΦΙΑ").success

    def test_expanding_folds_report_one_position(self):
        # one candidate unit covers two query characters
        assert match("ss", "ß").matched_positions == (0,)
        assert match("fi", "ﬁle").matched_positions == (0,)
        # one query character covers two candidate indices
        assert match("ß", "ss").matched_positions == (0,)
        assert match("STRASSE", "Straße").matched_positions == (0, 1, 2, 3, 4, 5)

    def test_term_may_end_inside_expanded_unit(self):
        result = match("stras", "Straße")
        assert result.success
        assert result.matched_positions == (0, 1, 2, 3, 4)
        assert not match("sa", "ßa").success

    def test_dotless_i_and_uppercase_agree(self):
        assert match("I", "ı").success
        assert match("ı", "I").success


class TestScoring:
    def test_contiguous_beats_scattered(self):
        contiguous = match("abc", "abcxxx")
        scattered = match("abc", "axbxcx")
        assert contiguous.success and scattered.success
        assert contiguous.score > scattered.score

    def test_word_boundary_terms_beat_embedded_terms(self):
        bounded = match("open settings", "Open Settings Dialog")
        embedded = match("open settings", "xopenyzsettingsdialog")
        assert bounded.success and embedded.success
        assert bounded.score > embedded.score

    def test_documented_default_scores(self):
        assert match("open settings", "Open Settings Dialog").score == 163
        assert match("open settings", "xopenyzsettingsdialog").score == 154
        assert match("gcm", "Git Commit").score == 24

    def test_word_boundary_beats_mid_word(self):
        assert match("c", "Git Commit").score > match("o", "Git Commit").score

    def test_tighter_span_scores_higher(self):
        assert match("ab", "xa-bx").score > match("ab", "xa--bx").score

    def test_coverage_favors_shorter_candidates(self):
        assert match("git", "Git").score > match("git", "Git Commit").score

    def test_digit_transition_counts_as_boundary(self):
        # '1' follows a letter, '0' follows a digit
        assert match("1", "win10").score > match("0", "win10").score

    def test_successful_match_stays_above_empty_query_score(self):
        cfg = ScoringConfig(weight_char=0, weight_coverage=0, bonus_consecutive=4,
                            bonus_word_boundary=3, bonus_case_match=2, penalty_gap_char=1)
        result = match("az", "a" + "b" * 100 + "z", cfg)
        assert result.success
        assert result.score == EMPTY_QUERY_SCORE + 1

    def test_deterministic(self):
        results = {match("open set", "Open Settings Dialog") for _ in range(5)}
        assert len(results) == 1


class TestScoringConfig:
    def test_defaults_validate(self):
        assert ScoringConfig().validate() == ScoringConfig()

    @pytest.mark.parametrize("overrides", [
        {"bonus_word_boundary": 9},
        {"bonus_case_match": 6},
        {"penalty_gap_char": 0},
        {"weight_coverage": -1},
        {"weight_coverage": 9},
        {"weight_coverage": 1000},
    ])
    def test_precedence_violations_rejected(self, overrides):
        with pytest.raises(ValueError):
            ScoringConfig(**overrides).validate()

    def test_coverage_cannot_outweigh_contiguity(self):
        cfg = ScoringConfig(weight_coverage=8).validate()
        assert match("ab", "xxabxxxxxx", cfg).score > match("ab", "xaxbx", cfg).score

    def test_custom_weights_change_scores(self):
        heavy = ScoringConfig(weight_char=10)
        assert match("gcm", "Git Commit", heavy).score > match("gcm", "Git Commit").score


class TestSearchPrecision:
    def test_parse(self):
        assert SearchPrecision.parse("REGULAR") is SearchPrecision.REGULAR
        assert SearchPrecision.parse(SearchPrecision.LOW) is SearchPrecision.LOW
        with pytest.raises(ValueError):
            SearchPrecision.parse("bogus")

    def test_thresholds_increase(self):
        assert SearchPrecision.NONE.min_score < SearchPrecision.LOW.min_score < SearchPrecision.REGULAR.min_score

    def test_meets_precision(self):
        assert match("", "x").meets_precision("none")
        assert not match("", "x").meets_precision("low")
        assert match("gcm", "Git Commit").meets_precision(SearchPrecision.REGULAR)
        assert not MatchResult(success=False, score=100).meets_precision("none")

    def test_span_and_first_position(self):
        result = match("gcm", "Git Commit")
        assert result.first_position == 0
        assert result.span == 6
        empty = match("", "Git Commit")
        assert empty.first_position is None
        assert empty.span == 0
