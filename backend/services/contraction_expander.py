"""
Contraction expansion for the Text Preprocessor.

Rewrites shortened word forms into their expanded multi-word forms before a
sentence is tokenized. Rules are an ordered list: each rule is applied to the
whole sentence before the next one runs, so earlier rules remove text from
contention for later ones (the pronoun rules must run before the generic
``'s`` separator).
"""
import logging
import re
from typing import List, Optional, Pattern, Sequence, Tuple

from models.contraction import ContractionRule
from services.errors import InvalidMatchArgumentError, MalformedRuleError

logger = logging.getLogger(__name__)


CONTRACTION_RULES: Tuple[ContractionRule, ...] = (
    # Personal pronouns: "he's", "she's", "it's" -> "<pronoun> is"
    ContractionRule(r"(^|[^a-zA-Z])([Hh]e)'s", r"\1\2 is", name="he_is"),
    ContractionRule(r"(^|[^a-zA-Z])([Ss]h?e)'s", r"\1\2 is", name="she_is"),
    ContractionRule(r"(^|[^a-zA-Z])([Ii]t)'s", r"\1\2 is", name="it_is"),

    # Possessive marker / remaining 's
    ContractionRule(r"'s", r" 's", name="possessive"),

    ContractionRule(r"'d", r" would", name="would"),
    ContractionRule(r"'re", r" are", name="are"),
    ContractionRule(r"'ll", r" will", name="will"),
    ContractionRule(r"n't", r" not", name="not"),
    ContractionRule(r"'nt", r" not", name="not_misspelled"),
    ContractionRule(r"'ve", r" have", name="have"),
    ContractionRule(r"'m", r" am", name="am"),

    # Numbers followed by letters: "80s" -> "80 s"
    ContractionRule(r"([0-9]+)([a-zA-Z]+)", r"\1 \2", name="digit_letter_split"),
)


class ContractionExpander:
    """Applies an ordered list of contraction rules to sentences."""

    def __init__(self, rules: Optional[Sequence[ContractionRule]] = None):
        """
        Compile the rule list.

        Args:
            rules: Ordered rules (defaults to CONTRACTION_RULES)

        Raises:
            MalformedRuleError: If any rule pattern fails to compile
        """
        self.rules = tuple(CONTRACTION_RULES if rules is None else rules)
        self._compiled: List[Tuple[ContractionRule, Pattern]] = []

        for rule in self.rules:
            try:
                self._compiled.append((rule, re.compile(rule.full_pattern)))
            except re.error as e:
                logger.error(f"Invalid contraction rule {rule.name or rule.pattern!r}: {e}")
                raise MalformedRuleError(
                    f"Contraction rule pattern does not compile: {rule.pattern!r}",
                    details={"rule": rule.name, "pattern": rule.pattern, "reason": str(e)},
                ) from e

        logger.debug(f"Compiled {len(self._compiled)} contraction rules")

    def expand(self, sentence: str) -> str:
        """
        Expand all contractions in a sentence.

        Args:
            sentence: Sentence text

        Returns:
            Sentence with every rule applied globally, in order

        Raises:
            InvalidMatchArgumentError: If sentence is not a string or a
                replacement template references a missing group
        """
        if not isinstance(sentence, str):
            raise InvalidMatchArgumentError(
                f"Expected a string sentence, got {type(sentence).__name__}",
                details={"type": type(sentence).__name__},
            )

        for rule, pattern in self._compiled:
            try:
                sentence = pattern.sub(rule.replacement, sentence)
            except (re.error, IndexError) as e:
                raise InvalidMatchArgumentError(
                    f"Invalid replacement for rule {rule.name or rule.pattern!r}: {e}",
                    details={"rule": rule.name, "replacement": rule.replacement},
                ) from e

        return sentence
