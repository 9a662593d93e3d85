"""URL configuration for the forum app."""

from django.urls import path

from .views import icon_legend


urlpatterns = [
    path("icons/", icon_legend, name="forum_icon_legend"),
]
