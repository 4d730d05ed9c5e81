"""Tests for name normalization."""

import pytest

from claude_tui.discovery import normalize


class TestNormalize:
    """Tests for normalize()."""

    def test_lowercases(self) -> None:
        """Test that names are lowercased."""
        assert normalize("ClaudeTUI") == "claudetui"

    def test_strips_separators(self) -> None:
        """Test hyphens, underscores and spaces are removed."""
        assert normalize("my_cool-app name") == "mycoolappname"

    def test_case_and_punctuation_insensitive(self) -> None:
        """Test differently written names normalize identically."""
        assert normalize("Daily-Digest") == normalize("daily digest")
        assert normalize("Daily Digest") == normalize("daily_digest")

    @pytest.mark.parametrize("text", ["", "Daily Digest", "a-b_c d", "Ünïcode-Name", "--__  "])
    def test_idempotent(self, text: str) -> None:
        """Test normalizing twice changes nothing."""
        assert normalize(normalize(text)) == normalize(text)

    def test_keeps_other_punctuation(self) -> None:
        """Test only the three separators are dropped."""
        assert normalize("app.v2") == "app.v2"
