from django.core.management.base import BaseCommand
from django.utils import timezone

from records.entities import ENTITY_TYPES
from records.services.sync import get_sync_service


class Command(BaseCommand):
    help = "Pull every collection from the remote store into the local fallback store."

    def handle(self, *args, **options):
        service = get_sync_service()
        if not service.is_remote:
            self.stdout.write(self.style.WARNING("Remote store not configured; local store left as is."))
            return

        failed = []
        for entity_type in ENTITY_TYPES.values():
            result = service.list_entities(entity_type)
            line = f"{entity_type.slug}: {len(result.records)} records from {result.source}"
            if result.warning:
                failed.append(entity_type.slug)
                self.stdout.write(self.style.WARNING(line))
            else:
                self.stdout.write(line)

        if failed:
            self.stdout.write(self.style.ERROR(f"Mirror incomplete, remote unreachable for: {', '.join(failed)}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Mirrored {len(ENTITY_TYPES)} collections at {timezone.now()}"))
