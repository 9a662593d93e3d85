"""Shared test fixtures for the forum app."""

from pathlib import Path

import pytest
from django.utils.safestring import SafeString, mark_safe
from PIL import Image
from pytest_django.fixtures import SettingsWrapper

from forum.icons import ForumIconRenderer, ThemeImageRenderer
from forum.types import IconKind


ICON_SIZE = (16, 16)


class RecordingImageRenderer:
    """Image renderer double returning a recognisable tag and remembering requested paths."""

    def __init__(self) -> None:
        self.paths: list[str] = []

    def render_image(self, path: str) -> SafeString:
        self.paths.append(path)
        return mark_safe(f'<img src="{path}" />')  # noqa: S308


@pytest.fixture()
def icon_root(tmp_path: Path, settings: SettingsWrapper) -> Path:
    """
    Create a 16x16 PNG for every icon kind and point the forum settings at them.

    Returns:
        Path: The directory containing ``misc/forum-<icon>.png``

    """
    misc_dir = tmp_path / "misc"
    misc_dir.mkdir()
    for kind in IconKind:
        Image.new("RGBA", ICON_SIZE).save(misc_dir / f"forum-{kind}.png")

    settings.FORUM_ICON_ROOT = tmp_path
    settings.FORUM_ICON_GETSIZE = True
    return tmp_path


@pytest.fixture()
def recording_renderer() -> RecordingImageRenderer:
    """Return an image renderer double."""
    return RecordingImageRenderer()


@pytest.fixture()
def forum_icon_renderer(recording_renderer: RecordingImageRenderer) -> ForumIconRenderer:
    """Return a ForumIconRenderer backed by the image renderer double."""
    return ForumIconRenderer(recording_renderer)


@pytest.fixture()
def theme_renderer(icon_root: Path) -> ThemeImageRenderer:
    """Return a ThemeImageRenderer reading the generated icons."""
    return ThemeImageRenderer(icon_root)
