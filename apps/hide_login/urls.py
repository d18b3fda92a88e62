"""
Hide Login URLs
"""
from django.urls import path
from . import views

app_name = 'hide_login'

urlpatterns = [
    path('options-general.php', views.settings_page, name='settings'),
    path('options.php', views.settings_save, name='save'),
]
