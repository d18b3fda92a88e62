from django.apps import AppConfig


class HideLoginConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.hide_login'
    label = 'hide_login'
    verbose_name = 'Hide Login'
