"""
Remove every trace of the hide login settings
"""
from django.core.management.base import BaseCommand
from django.urls import clear_url_caches
from apps.hide_login.configuration import get_configuration_provider


class Command(BaseCommand):
    help = "Deletes the stored login alias and redirect slug and clears cached routing."

    def handle(self, *args, **options):
        deleted = get_configuration_provider().delete_options()
        clear_url_caches()

        self.stdout.write(self.style.SUCCESS(f"Removed {deleted} hide login option(s); URL caches cleared."))
