"""
Forum template tags.

Usage:
    1. Load the tag library in your template:
       {% load forum_tags %}

    2. Render the status icon of a topic:
       {% forum_icon topic.new_posts topic.icon %}

Notes:
    - Icon images are expected at static/misc/forum-<icon>.png
    - Unknown icon names are rejected with a ValueError

"""

import structlog
from django import template
from django.utils.safestring import SafeString

from forum.icons import ForumIconRenderer, ThemeImageRenderer
from forum.types import IconKind


register = template.Library()

logger = structlog.get_logger(__name__)


@register.simple_tag
def forum_icon(new_posts: bool, icon: str) -> SafeString:  # noqa: FBT001
    """
    Render the status icon of a forum topic.

    Args:
        new_posts: Whether the topic contains posts the reader has not seen yet
        icon: One of 'hot', 'hot-new', 'new', 'default', 'closed' or 'sticky'

    Returns:
        SafeString: The icon markup, wrapped in ``<a id="new">`` when there are new posts

    Examples:
        {% forum_icon True 'sticky' %}
        {% forum_icon topic.new_posts topic.icon %}

    """
    try:
        kind = IconKind(icon)
    except ValueError:
        logger.warning("forum_icon_unknown", icon=icon)
        raise

    return ForumIconRenderer(ThemeImageRenderer()).render(bool(new_posts), kind)
