"""Unique-word-count equivalence between two renderings of the same text."""

from dataclasses import dataclass

from normalize.text import count_unique_words


@dataclass(frozen=True)
class EquivalenceResult:
    """Outcome of comparing two texts by unique word count."""

    equal: bool
    count_a: int
    count_b: int

    def describe(self, label_a: str = "A", label_b: str = "B") -> str:
        verdict = "match" if self.equal else "mismatch"
        return f"Unique word count {verdict}: {label_a}={self.count_a}, {label_b}={self.count_b}"


def check_equivalent_unique_word_counts(text_a: str | None, text_b: str | None) -> EquivalenceResult:
    """Compare the unique word counts of two cleaned texts.

    Never raises; the caller decides whether a mismatch is a failure.

    Example:
        >>> check_equivalent_unique_word_counts("The Fox ran.", "the fox RAN")
        EquivalenceResult(equal=True, count_a=3, count_b=3)
    """
    count_a = count_unique_words(text_a)
    count_b = count_unique_words(text_b)
    return EquivalenceResult(equal=count_a == count_b, count_a=count_a, count_b=count_b)
