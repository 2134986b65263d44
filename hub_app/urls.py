"""
URL configuration for the hub_app project.

Every micro-app is mounted under ``/api/<app>/``; authentication endpoints
live under ``/api/auth/``.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('users.urls')),
    path('api/bucket-list/', include('bucket_list.urls')),
    path('api/dating-journal/', include('dating_journal.urls')),
    path('api/dating-ideas/', include('dating_ideas.urls')),
    path('api/events/', include('events.urls')),
    path('api/blog/', include('blog.urls')),
    path('api/dashboard/', include('dashboard.urls')),

    # swagger endpoints
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]

# debug toolbar settings
if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns += [
        path("__debug__/", include(debug_toolbar.urls)),
    ]
