"""Defines the configuration for the Forum app."""

from django.apps import AppConfig


class ForumConfig(AppConfig):
    """Configuration class for the Forum app."""

    name = "forum"
