"""Unit tests for WordCounter."""
import sys
sys.path.insert(0, 'backend')

from models.analysis import AnalysisState
from services.word_counter import WordCounter


def test_counts_tokens_and_types():
    state = AnalysisState()
    WordCounter().count(["the", "cat", "saw", "the", "dog", "."], state)

    assert state.frequency_table["the"] == 2
    assert state.frequency_table["cat"] == 1
    assert state.token_count == 6
    assert state.type_count == 5


def test_accumulates_across_sentences():
    counter = WordCounter()
    state = AnalysisState()
    counter.count(["Hello", "world", "."], state)
    counter.count(["Hello", "again", "."], state)

    assert state.frequency_table["Hello"] == 2
    assert state.frequency_table["."] == 2
    assert state.token_count == 6
    assert state.type_count == 4


def test_type_count_is_distinct_keys():
    """Repeated tokens never inflate the type count."""
    state = AnalysisState()
    WordCounter().count(["a"] * 10, state)

    assert state.token_count == 10
    assert state.type_count == 1


def test_token_order_does_not_matter():
    first, second = AnalysisState(), AnalysisState()
    WordCounter().count(["b", "a", "b", "c"], first)
    WordCounter().count(["c", "b", "a", "b"], second)

    assert first.to_result() == second.to_result()


def test_empty_sentence():
    state = AnalysisState()
    WordCounter().count([], state)

    assert state.token_count == 0
    assert state.type_count == 0
    assert dict(state.frequency_table) == {}


def test_case_sensitive():
    state = AnalysisState()
    WordCounter().count(["The", "the"], state)
    assert state.type_count == 2
