"""Tests for ticketnote.ticket module."""

import re

import pytest

from ticketnote.exceptions import ConfigurationError
from ticketnote.ticket import compile_pattern, extract_ticket


class TestCompilePattern:
    """Tests for compile_pattern function."""

    def test_single_group_compiles(self):
        """Test that a pattern with one group is accepted."""
        pattern = compile_pattern(r"\b(ch\d+)\b")
        assert pattern.pattern == r"\b(ch\d+)\b"
        assert pattern.groups == 1

    def test_no_group_rejected(self):
        """Test that a pattern without a group is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            compile_pattern(r"ch\d+")

        assert "one capture group" in str(exc_info.value)

    def test_two_groups_rejected(self):
        """Test that a pattern with two groups is rejected."""
        with pytest.raises(ConfigurationError):
            compile_pattern(r"(ch)(\d+)")

    def test_non_capturing_groups_allowed(self):
        """Test that non-capturing groups don't count."""
        pattern = compile_pattern(r"(?:feature|bugfix)/([A-Z]+-\d+)")
        assert pattern.groups == 1

    def test_invalid_syntax_rejected(self):
        """Test that invalid regexp syntax is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            compile_pattern(r"(ch\d+")

        assert "Invalid regexp" in str(exc_info.value)


class TestExtractTicket:
    """Tests for extract_ticket function."""

    def test_extracts_group(self, ticket_pattern):
        """Test extracting the ticket from a matching branch."""
        assert extract_ticket(ticket_pattern, "feature/ch1234/foo") == "ch1234"

    def test_first_match_wins(self, ticket_pattern):
        """Test that the first match is used."""
        assert extract_ticket(ticket_pattern, "ch1/ch2") == "ch1"

    def test_no_match(self, ticket_pattern):
        """Test that a non-matching branch gives None."""
        assert extract_ticket(ticket_pattern, "feature/no-ticket-here") is None

    def test_jira_style(self):
        """Test a JIRA-style key pattern."""
        pattern = compile_pattern(r"([A-Z][A-Z0-9]+-\d+)")
        assert extract_ticket(pattern, "feature/PROJ-42-login") == "PROJ-42"

    def test_group_not_participating(self):
        """Test that a match without the group counts as no match."""
        pattern = re.compile(r"(ch\d+)?-fix")
        assert extract_ticket(pattern, "bug-fix") is None

    def test_pattern_without_group(self):
        """Test that a pattern without groups never yields a ticket."""
        pattern = re.compile(r"ch\d+")
        assert extract_ticket(pattern, "feature/ch1234") is None
