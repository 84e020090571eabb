from django.core.management.base import BaseCommand

from records.entities import ENTITY_TYPES
from records.services.local_store import LocalStore


class Command(BaseCommand):
    help = "Seed the local fallback store with example records (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--force', action='store_true', help='Overwrite collections that already exist.')

    def handle(self, *args, **opts):
        store = LocalStore()
        for entity_type in ENTITY_TYPES.values():
            if store.seed(entity_type, force=opts['force']):
                count = len(store.get_entities(entity_type))
                self.stdout.write(self.style.SUCCESS(f"seeded: {entity_type.slug} ({count} records)"))
            else:
                self.stdout.write(f"kept: {entity_type.slug} (already present)")
        self.stdout.write(self.style.SUCCESS("Local store ready."))
