"""Word and punctuation tokenizer."""
import logging
import re
from typing import List

from services.errors import InvalidMatchArgumentError

logger = logging.getLogger(__name__)


class Tokenizer:
    """Splits a contraction-expanded sentence into tokens."""

    # Alternatives are tried in order at each position:
    # word run, ellipsis, possessive marker, any single non-space character.
    TOKEN_PATTERN = re.compile(r"(\w+)|(\.{3})|('s)|[^\s]")

    def tokenize(self, sentence: str) -> List[str]:
        """
        Tokenize a sentence left to right.

        Args:
            sentence: Contraction-expanded sentence

        Returns:
            Ordered list of tokens (empty for empty or blank input)

        Raises:
            InvalidMatchArgumentError: If sentence is not a string
        """
        if not isinstance(sentence, str):
            raise InvalidMatchArgumentError(
                f"Expected a string sentence, got {type(sentence).__name__}",
                details={"type": type(sentence).__name__},
            )

        tokens = [match.group() for match in self.TOKEN_PATTERN.finditer(sentence)]
        logger.debug(f"Tokenized sentence into {len(tokens)} tokens")
        return tokens
