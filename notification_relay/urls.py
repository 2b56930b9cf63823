"""Root URL configuration for the notification relay service.

The relay keeps the public paths of the mobile client contract
(``/api/...``, ``/health``), so the app URLs are mounted at the root.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("relay.urls")),
]
