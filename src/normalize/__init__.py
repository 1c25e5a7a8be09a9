"""Normalize rendered and API text into comparable form."""

from .text import clean_section_text, count_unique_words, normalize_to_words, strip_html

__all__ = [
    "clean_section_text",
    "count_unique_words",
    "normalize_to_words",
    "strip_html",
]
