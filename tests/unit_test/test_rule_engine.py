"""
Unit tests for services/evaluation/rule_engine.py
"""
import pytest

from sentence_checker.models.rule import CheckName, EvaluationStatus, RuleConfig, Tier
from sentence_checker.services.evaluation.rule_engine import (
    check_conditional,
    check_punctuation,
    check_required_words,
    check_word_count,
    classify_level,
    clamp_score,
    evaluate,
    run_checks,
)


@pytest.mark.unit
class TestWordCountCheck:

    @pytest.mark.parametrize("n,tier,delta", [
        (10, Tier.FULL, 2),
        (8, Tier.FULL, 2),
        (7, Tier.PARTIAL, 1),
        (4, Tier.PARTIAL, 1),   # floor(8 / 2) is inclusive
        (3, Tier.NONE, 0),
        (1, Tier.NONE, 0),
    ])
    def test_tiers(self, n, tier, delta):
        out = check_word_count(" ".join(["word"] * n), 8)
        assert out.check == CheckName.WORD_COUNT
        assert out.tier == tier
        assert out.delta == delta
        assert out.word_count == n

    def test_odd_minimum_uses_floor(self):
        assert check_word_count("a b c d", 9).tier == Tier.PARTIAL
        assert check_word_count("a b c", 9).tier == Tier.NONE

    def test_zero_minimum_always_full(self):
        assert check_word_count("one", 0).delta == 2

    def test_credit_is_monotonic(self):
        deltas = [check_word_count(" ".join(["w"] * n), 10).delta for n in range(1, 15)]
        assert deltas == sorted(deltas)


@pytest.mark.unit
class TestRequiredWordsCheck:

    def test_any_alternative_matches(self):
        out = check_required_words("we left since it rained", ("because", "since"))
        assert out.tier == Tier.FULL and out.delta == 2

    def test_phrase_alternative(self):
        assert check_required_words("even though it rained", ("even though",)).delta == 2

    def test_substring_match(self):
        assert check_required_words("it was becauseful", ("because",)).delta == 2

    def test_failure_keeps_alternatives_in_order(self):
        out = check_required_words("nothing here", ("since", "because"))
        assert out.tier == Tier.NONE and out.delta == 0
        assert out.alternatives == ("since", "because")


@pytest.mark.unit
class TestConditionalCheck:

    def test_if_and_would(self):
        assert check_conditional("if i were rich i would buy it").delta == 1

    def test_order_is_ignored(self):
        assert check_conditional("i would go if you came").delta == 1

    def test_substrings_inside_other_words_count(self):
        # "gift" contains "if"; only presence is checked
        assert check_conditional("a gift would be nice").delta == 1

    @pytest.mark.parametrize("text", ["if i go", "i would go", "nothing"])
    def test_missing_marker(self, text):
        out = check_conditional(text)
        assert out.tier == Tier.NONE and out.delta == 0


@pytest.mark.unit
class TestPunctuationCheck:

    @pytest.mark.parametrize("raw", ["Done.", "Really?", "Wow!", "Wow!   \n"])
    def test_terminal_marks(self, raw):
        assert check_punctuation(raw).delta == 1

    @pytest.mark.parametrize("raw", ["No mark", "Comma,", "", "   ", None, 7])
    def test_missing_mark(self, raw):
        assert check_punctuation(raw).delta == 0


@pytest.mark.unit
class TestScoring:

    @pytest.mark.parametrize("raw,expected", [(-1, 0), (0, 0), (5, 5), (6, 5)])
    def test_clamp(self, raw, expected):
        assert clamp_score(raw) == expected

    @pytest.mark.parametrize("score,level", [
        (0, "error"), (1, "error"), (2, "warn"), (3, "warn"), (4, "ok"), (5, "ok"),
    ])
    def test_classify(self, score, level):
        assert classify_level(score) == level


@pytest.mark.unit
class TestEvaluate:

    def test_scenario_full_marks(self, because_config):
        result = evaluate(because_config, "I stayed home because it was raining heavily outside today.")
        assert result.score == 5
        assert result.level == "ok"
        assert result.messages == [
            "✅ Good length (10 words).",
            "✅ You used the target word/structure.",
            "✅ Good punctuation at the end.",
        ]

    def test_scenario_short_sentence(self, because_config):
        result = evaluate(because_config, "I stayed home.")
        assert result.score == 1
        assert result.level == "error"
        assert result.messages == [
            "❌ Too short (3 words). Try to write a longer sentence.",
            "❌ You didn’t use the target word. Try to include: because",
            "✅ Good punctuation at the end.",
        ]

    def test_scenario_conditional_without_mark(self, conditional_config):
        result = evaluate(conditional_config, "if I had more time I would travel the whole world slowly")
        assert result.score == 3
        assert result.level == "warn"
        assert result.messages == [
            "✅ Good length (12 words).",
            "✅ It looks like a second conditional sentence.",
            "⚠️ Add a full stop or question mark at the end.",
        ]

    def test_clamped_when_every_check_passes(self):
        config = RuleConfig(min_words=8, required_words=("because",), require_conditional=True)
        evaluation = run_checks(config, "If it rained I would stay home because I hate rain.")
        assert sum(o.delta for o in evaluation.outcomes) == 6
        assert evaluation.score == 5
        assert evaluation.level == "ok"

    def test_missing_config(self):
        result = evaluate(None, "anything")
        assert result.score == 0
        assert result.messages == ["No configuration found for this sentence."]
        assert result.level is None

    @pytest.mark.parametrize("text", ["", "   ", "!!!", "123", None])
    def test_empty_submission(self, because_config, text):
        result = evaluate(because_config, text)
        assert result.score == 0
        assert result.messages == ["❗ Please write a sentence."]
        assert result.level is None

    def test_punctuation_scored_from_raw_text(self, because_config):
        result = evaluate(because_config, "Stop because I said so!")
        assert result.messages[-1] == "✅ Good punctuation at the end."
        assert result.score == 4

    def test_disabled_checks_emit_no_message(self):
        config = RuleConfig(min_words=2)
        evaluation = run_checks(config, "Hello there.")
        assert [o.check for o in evaluation.outcomes] == [CheckName.WORD_COUNT, CheckName.PUNCTUATION]
        assert evaluation.status == EvaluationStatus.GRADED

    def test_deterministic(self, conditional_config):
        text = "If I won, I would share it."
        assert evaluate(conditional_config, text) == evaluate(conditional_config, text)

    @pytest.mark.parametrize("text", [
        "x",
        "If I would because although.",
        "because " * 40,
        "Would if?",
    ])
    def test_score_bounds(self, text):
        config = RuleConfig(min_words=3, required_words=("because", "although"), require_conditional=True)
        assert 0 <= evaluate(config, text).score <= 5
