"""Views for the forum app."""

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from .types import IconKind


# Icons that only ever appear on topics with unread posts
NEW_POST_ICONS = frozenset({IconKind.New, IconKind.HotNew})


@require_GET
def icon_legend(request: HttpRequest) -> HttpResponse:
    """Display every topic status icon with its description."""
    icons = [
        {
            "kind": kind,
            "description": kind.description,
            "new_posts": kind in NEW_POST_ICONS,
        }
        for kind in IconKind
    ]
    return render(request, "forum/icon_legend.html", {"icons": icons})
