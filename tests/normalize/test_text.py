"""Tests for section text cleaning and word normalization."""

import pytest

from normalize.text import clean_section_text, count_unique_words, normalize_to_words, strip_html


class TestCleanSectionText:
    """Tests for clean_section_text."""

    def test_heading_edit_marker_and_citation_tail_removed(self):
        """Test the heading, [edit] and everything from [1] on are removed."""
        raw = "Debugging features[edit] Foo bar.[1] Cite text..."
        assert clean_section_text(raw, "Debugging features") == "Foo bar."

    def test_heading_removed_case_insensitively(self):
        """Test every occurrence of the heading is removed regardless of case."""
        raw = "DEBUGGING FEATURES Trace viewer and debugging features"
        assert clean_section_text(raw, "Debugging features") == "Trace viewer and"

    def test_heading_with_regex_metacharacters_is_literal(self):
        """Test headings are matched literally, not as patterns."""
        raw = "Tools (beta) list of tools"
        assert clean_section_text(raw, "Tools (beta)") == "list of tools"

    @pytest.mark.parametrize("marker", ["[edit]", "[ edit ]", "[Edit]", "[  EDIT]"])
    def test_edit_marker_variants(self, marker):
        """Test edit markers with any spacing and case are removed."""
        assert clean_section_text(f"Before {marker} after") == "Before after"

    def test_truncates_at_first_citation(self):
        """Test text is cut at the first citation, not later ones."""
        raw = "First part.[2] Second part.[3] Third."
        assert clean_section_text(raw) == "First part."

    def test_truncates_at_entity_escaped_citation(self):
        """Test &#91;1&#93; counts as a citation marker."""
        raw = "Inspector shows steps.&#91;12&#93; References follow"
        assert clean_section_text(raw) == "Inspector shows steps."

    def test_bracketed_non_numbers_are_not_citations(self):
        """Test [note] is kept since only numbers mark citations."""
        assert clean_section_text("Some [note] here") == "Some [note] here"

    def test_html_entities_replaced_with_space(self):
        """Test HTML entities become single spaces."""
        assert clean_section_text("Trace&nbsp;viewer &amp; inspector") == "Trace viewer inspector"

    def test_whitespace_collapsed(self):
        """Test whitespace runs collapse and ends are trimmed."""
        assert clean_section_text("  Code\n\ngen \t tool  ") == "Code gen tool"

    def test_no_decoration_unchanged(self):
        """Test plain text passes through untouched."""
        assert clean_section_text("Plain text.") == "Plain text."

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
    def test_blank_input_returns_empty(self, raw):
        """Test blank input yields an empty string instead of failing."""
        assert clean_section_text(raw) == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "Debugging features[edit] Foo bar.[1] Cite text...",
            "Trace&nbsp;viewer [ edit ] and   codegen",
            "Nothing to clean",
            "A&#91;3&#93; tail",
        ],
    )
    def test_idempotent(self, raw):
        """Test cleaning twice gives the same result as cleaning once."""
        once = clean_section_text(raw)
        assert clean_section_text(once) == once


class TestStripHtml:
    """Tests for strip_html."""

    def test_tags_replaced_with_space(self):
        """Test tags are removed without gluing adjacent words together."""
        html = '<div class="mw-parser-output"><p>Trace</p><ul><li>viewer</li></ul></div>'
        assert strip_html(html) == "Trace viewer"

    def test_inline_tags(self):
        """Test inline tags leave their text in place."""
        assert strip_html("<p>Use <b>codegen</b> to record</p>") == "Use codegen to record"

    def test_blank_input(self):
        """Test blank HTML yields an empty string."""
        assert strip_html("") == ""
        assert strip_html(None) == ""


class TestNormalizeToWords:
    """Tests for normalize_to_words."""

    def test_lowercases_and_splits_on_punctuation(self):
        """Test words are case-folded and split on non-word characters."""
        assert normalize_to_words("The Fox, ran!") == ["the", "fox", "ran"]

    def test_duplicates_kept_in_order(self):
        """Test repeated words are kept in occurrence order."""
        assert normalize_to_words("a b A c b") == ["a", "b", "a", "c", "b"]

    def test_underscore_and_digits_are_word_characters(self):
        """Test underscores and digits stay inside words."""
        assert normalize_to_words("snake_case v1.2") == ["snake_case", "v1", "2"]

    def test_tokens_contain_only_word_characters(self):
        """Test no token is empty or contains punctuation."""
        words = normalize_to_words("--- (Trace-viewer) ... [edit] ---")
        assert words == ["trace", "viewer", "edit"]
        assert all(word and word.replace("_", "").isalnum() for word in words)

    @pytest.mark.parametrize("text", [None, "", "   ", "!!! ..."])
    def test_empty_results(self, text):
        """Test blank or punctuation-only input yields no words."""
        assert normalize_to_words(text) == []


class TestCountUniqueWords:
    """Tests for count_unique_words."""

    def test_counts_distinct_case_folded_words(self):
        """Test counting ignores case and repetition."""
        assert count_unique_words("The Fox ran. the fox RAN") == 3

    def test_empty(self):
        """Test empty text has zero unique words."""
        assert count_unique_words("") == 0
        assert count_unique_words(None) == 0

    @pytest.mark.parametrize(
        "text",
        [
            "The Fox ran.",
            "Playwright Inspector, Trace Viewer & Codegen; codegen!",
            "  mixed_Case 42 mixed_case  ",
            "",
        ],
    )
    def test_count_stable_after_rejoining_words(self, text):
        """Test counting the normalized words again gives the same count."""
        rejoined = " ".join(normalize_to_words(text))
        assert count_unique_words(rejoined) == count_unique_words(text)
