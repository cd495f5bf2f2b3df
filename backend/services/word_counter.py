"""Token and type counting."""
import logging
from typing import Iterable

from models.analysis import AnalysisState

logger = logging.getLogger(__name__)


class WordCounter:
    """Accumulates token frequencies into an analysis state."""

    def count(self, tokens: Iterable[str], state: AnalysisState) -> None:
        """
        Add one occurrence per token, then refresh the totals.

        token_count is the sum of all frequencies and type_count is the
        number of distinct tokens.

        Args:
            tokens: Tokens of one sentence
            state: Analysis state owned by the current run
        """
        tokens = list(tokens)
        state.frequency_table.update(tokens)
        state.token_count = sum(state.frequency_table.values())
        state.type_count = len(state.frequency_table)
        logger.debug(
            f"Counted {len(tokens)} tokens: total={state.token_count}, types={state.type_count}"
        )
