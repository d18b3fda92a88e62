"""
Main URL Configuration for the Hide Login site
"""
from django.urls import path, include

urlpatterns = [
    # Public pages and the real login endpoint (reached through the alias)
    path('', include('apps.authentication.urls')),

    # Administrative area, guarded by HideLoginMiddleware
    path('wp-admin/', include('apps.dashboard.urls')),
    path('wp-admin/', include('apps.hide_login.urls')),
]
