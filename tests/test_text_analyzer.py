"""Tests for the full TextAnalyzer pipeline."""
import sys
sys.path.insert(0, 'backend')

import pytest
from models.contraction import ContractionRule
from services.contraction_expander import ContractionExpander
from services.errors import MalformedRuleError, SourceUnreadableError
from services.text_analyzer import TextAnalyzer

SCENARIO = "Hello world. How are you?\n\nI'm fine.\n"

SAMPLE_DOCUMENTS = [
    "",
    "One line only",
    SCENARIO,
    "He's happy. It's fine.\nThe dog's bone is gone...\n\n\nWait... really? Yes!",
    "the 1990s were wild\n   \nWe'll see, won't we? They're sure I'd go.",
]


@pytest.fixture
def analyzer():
    """Create TextAnalyzer with the corrected counting rules."""
    return TextAnalyzer(legacy_counting=False)


@pytest.fixture
def legacy_analyzer():
    """Create TextAnalyzer reproducing the legacy counting rules."""
    return TextAnalyzer(legacy_counting=True)


class TestScenario:
    """Two paragraphs, three sentences."""

    def test_counts(self, analyzer):
        result = analyzer.analyze_text(SCENARIO)

        assert result.paragraph_count == 2
        assert result.sentence_count == 3
        assert result.token_count == 11
        assert result.type_count == 10

    def test_contraction_tokens(self, analyzer):
        table = analyzer.analyze_text(SCENARIO).frequency_table

        for token in ("I", "am", "fine", "."):
            assert token in table
        assert table["."] == 2
        assert "'m" not in table
        assert "I'm" not in table

    def test_legacy_sentence_count_undercounts(self, legacy_analyzer):
        """Legacy rule counts (segments - 1) per line: 1 + 0."""
        result = legacy_analyzer.analyze_text(SCENARIO)

        assert result.paragraph_count == 2
        assert result.sentence_count == 1
        assert result.token_count == 11
        assert result.type_count == 10


class TestContractions:
    """Contraction handling seen through the whole pipeline."""

    def test_pronoun_contractions(self, analyzer):
        table = analyzer.analyze_text("He's happy. It's fine.").frequency_table

        assert table == {"He": 1, "is": 2, "happy": 1, ".": 2, "It": 1, "fine": 1}
        assert "'s" not in table

    def test_possessive(self, analyzer):
        table = analyzer.analyze_text("The dog's bone").frequency_table
        assert table == {"The": 1, "dog": 1, "'s": 1, "bone": 1}

    def test_digit_letter_split(self, analyzer):
        table = analyzer.analyze_text("the 1990s were wild").frequency_table
        assert table == {"the": 1, "1990": 1, "s": 1, "were": 1, "wild": 1}

    def test_ellipsis(self, analyzer):
        table = analyzer.analyze_text("Wait... really?").frequency_table
        assert table == {"Wait": 1, "...": 1, "really": 1, "?": 1}


class TestLineBreaks:
    """Sentences that span a line break."""

    def test_joined_paragraph_counts_one_sentence(self, analyzer):
        result = analyzer.analyze_text("This sentence spans\ntwo lines.")

        assert result.paragraph_count == 1
        assert result.sentence_count == 1

    def test_legacy_segments_each_line(self, legacy_analyzer):
        result = legacy_analyzer.analyze_text("This sentence spans\ntwo lines.")

        assert result.paragraph_count == 1
        assert result.sentence_count == 0

    def test_period_before_lowercase_is_one_sentence(self, analyzer):
        assert analyzer.analyze_text("I saw it. then I left.").sentence_count == 1

    def test_ellipsis_before_capital_is_two_sentences(self, analyzer):
        assert analyzer.analyze_text("Wait... Really?").sentence_count == 2

    def test_tokens_do_not_depend_on_mode(self, analyzer, legacy_analyzer):
        text = SAMPLE_DOCUMENTS[3]
        assert analyzer.analyze_text(text).frequency_table == legacy_analyzer.analyze_text(text).frequency_table


class TestInvariants:
    """Properties that hold for every document."""

    @pytest.mark.parametrize("text", SAMPLE_DOCUMENTS)
    @pytest.mark.parametrize("legacy", [False, True])
    def test_token_and_type_counts(self, text, legacy):
        result = TextAnalyzer(legacy_counting=legacy).analyze_text(text)

        assert result.token_count == sum(result.frequency_table.values())
        assert result.type_count == len(result.frequency_table)
        assert all(count >= 1 for count in result.frequency_table.values())

    @pytest.mark.parametrize("text", SAMPLE_DOCUMENTS)
    def test_idempotent(self, analyzer, text):
        assert analyzer.analyze_text(text) == analyzer.analyze_text(text)

    def test_runs_are_independent(self, analyzer):
        """Reusing an analyzer never carries counts over."""
        first = analyzer.analyze_text(SCENARIO)
        analyzer.analyze_text("Something else entirely. With more words in it.")
        again = analyzer.analyze_text(SCENARIO)

        assert first == again

    def test_separate_analyzers_agree(self):
        assert TextAnalyzer().analyze_text(SCENARIO) == TextAnalyzer().analyze_text(SCENARIO)

    def test_empty_document(self, analyzer):
        result = analyzer.analyze_text("")

        assert result.paragraph_count == 0
        assert result.sentence_count == 0
        assert result.token_count == 0
        assert result.frequency_table == {}

    @pytest.mark.parametrize("legacy", [False, True])
    @pytest.mark.parametrize("text", ["x\x0c\x0cy", "a\x0bb c\x85d", "one\r\ntwo\rthree\n\nfour"])
    def test_text_splits_lines_like_a_file(self, text, legacy, tmp_path):
        """In-memory text and the same text read from disk give the same result."""
        from services.document_source import DocumentSource

        path = tmp_path / "doc.txt"
        path.write_bytes(text.encode("utf-8"))
        analyzer = TextAnalyzer(legacy_counting=legacy)

        assert analyzer.analyze_text(text) == analyzer.analyze(DocumentSource(str(path)).lines())

    def test_form_feed_is_not_a_line_break(self, legacy_analyzer):
        assert legacy_analyzer.analyze_text("x\x0c\x0cy").paragraph_count == 1

    def test_analyze_accepts_lines_with_newlines(self, analyzer):
        lines = ["Hello world. How are you?\n", "\n", "I'm fine.\n"]
        assert analyzer.analyze(lines) == analyzer.analyze_text(SCENARIO)


class TestErrors:
    """Fatal errors propagate to the caller."""

    def test_read_failure_mid_stream(self, analyzer):
        def failing_lines():
            yield "First line."
            raise OSError("disk went away")

        with pytest.raises(SourceUnreadableError) as exc_info:
            analyzer.analyze(failing_lines())

        assert exc_info.value.error.code == "SOURCE_UNREADABLE"

    def test_malformed_rules_fail_at_construction(self):
        with pytest.raises(MalformedRuleError):
            TextAnalyzer(expander=ContractionExpander(rules=[ContractionRule(r"(", r"")]))
