# products/management/commands/sync_category_counts.py

from django.core.management.base import BaseCommand

from products.services.category_counts import resync_all_category_counts


class Command(BaseCommand):
    help = "Recompute every category's cached product_count from the products table"

    def handle(self, *args, **options):
        results = resync_all_category_counts()

        for slug, count in sorted(results.items()):
            self.stdout.write(f"{slug}: {count}")

        self.stdout.write(
            self.style.SUCCESS(f"Resynced {len(results)} categories.")
        )
