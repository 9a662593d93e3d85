"""
Rendering of forum topic status icons.

A topic icon is the image for ``misc/forum-<icon>.png``, wrapped in an ``<a id="new">`` anchor when
the topic has unread posts so that "jump to new post" links have a target.

The image markup itself is produced by an injected :class:`ImageRenderer`. The site uses
:class:`ThemeImageRenderer`, which points the image at the static files URL and reads its
dimensions from disk with Pillow.
"""

from pathlib import Path
from typing import Any, Protocol

import structlog
from django.conf import settings
from django.forms.utils import flatatt
from django.templatetags.static import static
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe
from PIL import Image

from .types import IconKind


logger = structlog.get_logger(__name__)

ICON_PATH_TEMPLATE = "misc/forum-{icon}.png"


class ImageRenderer(Protocol):
    """Anything able to turn a relative image path into image markup."""

    def render_image(self, path: str) -> SafeString:
        """Return the markup displaying the image at *path*."""
        ...


class ThemeImageRenderer:
    """
    Render ``<img>`` tags for images shipped with the site.

    Args:
        root: Directory relative image paths are resolved against when reading their size.
            Defaults to ``settings.FORUM_ICON_ROOT``.
        getsize: Read the image dimensions and emit ``width``/``height`` attributes. When
            enabled, an image that cannot be found or read renders as an empty string.
            Defaults to ``settings.FORUM_ICON_GETSIZE``.

    """

    def __init__(self, root: Path | None = None, *, getsize: bool | None = None) -> None:
        self.root = Path(root if root is not None else settings.FORUM_ICON_ROOT)
        self.getsize = settings.FORUM_ICON_GETSIZE if getsize is None else getsize

    def render_image(
        self,
        path: str,
        alt: str = "",
        title: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> SafeString:
        """
        Render an image tag for *path*.

        Args:
            path: Path of the image relative to the static root
            alt: Alternative text, escaped on output
            title: Title text, escaped on output
            attributes: Extra HTML attributes appended after the size attributes

        Returns:
            SafeString: The ``<img>`` markup, or an empty string when the size is requested and
                        the image is unavailable

        """
        attrs: dict[str, Any] = {}
        if self.getsize:
            size = self._image_size(path)
            if size is None:
                return mark_safe("")
            attrs["width"], attrs["height"] = size
        attrs.update(attributes or {})

        return format_html(
            '<img src="{}" alt="{}" title="{}"{} />',
            static(path),
            alt,
            title,
            flatatt(attrs),
        )

    def _image_size(self, path: str) -> tuple[int, int] | None:
        image_path = self.root / path
        try:
            with Image.open(image_path) as image:
                return image.size
        except OSError as exc:
            # Covers missing files as well as PIL.UnidentifiedImageError
            logger.warning("forum_icon_image_missing", path=str(image_path), error=str(exc))
            return None


class ForumIconRenderer:
    """Render the status icon of a forum topic."""

    def __init__(self, image_renderer: ImageRenderer) -> None:
        self.image_renderer = image_renderer

    @staticmethod
    def icon_path(icon: IconKind) -> str:
        """Return the relative image path for *icon*."""
        return ICON_PATH_TEMPLATE.format(icon=icon.value)

    def render(self, new_posts: bool, icon: IconKind) -> SafeString:  # noqa: FBT001
        """
        Render *icon*, anchored as the "new" jump target when the topic has new posts.

        Examples:
            ``render(True, IconKind.Sticky)`` gives ``<a id="new"><img ... /></a>``.

        """
        image = self.image_renderer.render_image(self.icon_path(icon))
        if new_posts:
            return format_html('<a id="new">{}</a>', image)
        return format_html("{}", image)
