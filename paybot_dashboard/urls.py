"""URL routing for the dashboard backend.


The /api/ namespace is what the SPA talks to; /admin/ is the stock Django admin
over the same tables.
"""

from django.contrib import admin
from django.urls import path, include


urlpatterns = [
	path("admin/", admin.site.urls),
	path("api/", include("api.urls")),
]
