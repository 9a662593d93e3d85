"""Tests for forum.types."""

import pytest

from forum.types import IconKind


class TestIconKind:
    """Verify the closed set of forum topic icons."""

    def test_values(self) -> None:
        """Expose exactly the six status icons in declaration order."""
        assert [kind.value for kind in IconKind] == [
            "hot",
            "hot-new",
            "new",
            "default",
            "closed",
            "sticky",
        ]

    def test_lookup_by_value(self) -> None:
        """Coerce icon names coming from templates into members."""
        assert IconKind("hot-new") is IconKind.HotNew

    @pytest.mark.parametrize("value", ["", "HOT", "locked", "forum-hot"])
    def test_unknown_value_rejected(self, value: str) -> None:
        """Raise ValueError for names outside the closed set."""
        with pytest.raises(ValueError, match="is not a valid IconKind"):
            IconKind(value)

    def test_str_is_value(self) -> None:
        """Format members as their plain icon name."""
        assert f"{IconKind.Sticky}" == "sticky"

    def test_every_kind_has_description(self) -> None:
        """Provide a description for each icon."""
        assert str(IconKind.Default.description) == "No new posts"
        assert all(str(kind.description) for kind in IconKind)
