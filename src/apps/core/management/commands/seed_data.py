# src/apps/core/management/commands/seed_data.py
"""
Load the demo data set.

    python manage.py seed_data           # only when the database is empty
    python manage.py seed_data --reset   # wipe everything and reseed
"""

from django.core.management.base import BaseCommand

from apps.core.services import SeedService


class Command(BaseCommand):
    help = 'Seed demo aircraft, owners, clients, flights and users'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete all records before seeding',
        )

    def handle(self, *args, **options):
        if options['reset']:
            counts = SeedService.reset()
            self.stdout.write(self.style.SUCCESS(f"Data reset: {counts}"))
            return

        if SeedService.initialize():
            self.stdout.write(self.style.SUCCESS('Demo data loaded'))
        else:
            self.stdout.write('Database already contains data, nothing to do')
