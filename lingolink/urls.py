"""
URL configuration for the lingolink project.

The JSON API lives under /api; see connections.urls for the individual routes.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('connections.urls')),
]
