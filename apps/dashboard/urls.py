"""
Dashboard URLs
"""
from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('', views.index, name='index'),
    path('admin-ajax.php', views.admin_ajax, name='ajax'),
    path('admin-post.php', views.admin_post, name='post'),
]
