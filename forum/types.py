"""
Forum topic status types.

This module provides the closed set of icon kinds a forum topic can be displayed with.
"""

from enum import StrEnum

from django.utils.functional import Promise
from django.utils.translation import gettext_lazy as _


class IconKind(StrEnum):
    """Enumeration of forum topic status icons."""

    Hot = "hot"
    HotNew = "hot-new"
    New = "new"
    Default = "default"
    Closed = "closed"
    Sticky = "sticky"

    @property
    def description(self) -> Promise:
        """Human readable description of the topic status."""
        return ICON_DESCRIPTIONS[self]


ICON_DESCRIPTIONS: dict[IconKind, Promise] = {
    IconKind.Hot: _("Hot topic"),
    IconKind.HotNew: _("Hot topic with new posts"),
    IconKind.New: _("New posts"),
    IconKind.Default: _("No new posts"),
    IconKind.Closed: _("Closed topic"),
    IconKind.Sticky: _("Sticky topic"),
}
