"""URL configuration for forum_site project."""

from django.urls import include, path


urlpatterns = [
    path("forum/", include("forum.urls")),
]
