"""
Hide Login Models
Key/value option storage for the settings saved through the admin page
"""
from django.db import models


class LoginOption(models.Model):
    name = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name}={self.value}"
