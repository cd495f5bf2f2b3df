"""Contraction rule data model."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ContractionRule:
    """One ordered rewrite rule applied before tokenization."""
    pattern: str
    replacement: str  # re.sub template, groups as \1, \2
    word_boundary: bool = True  # append \b to the pattern
    name: str = ""

    @property
    def full_pattern(self) -> str:
        return self.pattern + r"\b" if self.word_boundary else self.pattern
