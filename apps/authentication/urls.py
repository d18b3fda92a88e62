"""
Authentication URLs
"""
from django.urls import path
from django.views.generic import TemplateView
from . import views

urlpatterns = [
    path('', TemplateView.as_view(template_name='home.html'), name='home'),
    path('wp-login.php', views.login_page, name='login'),
]
