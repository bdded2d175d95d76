import logging

from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Q

from marketplace.catalog.domain.models import Product, Subcategory
from marketplace.categories import LEGACY_ALIASES, LMART

logger = logging.getLogger(__name__)


def alias_filter():
    query = Q()
    for alias in LEGACY_ALIASES:
        query |= Q(category__iexact=alias)
    return query


class Command(BaseCommand):
    help = "Rewrites legacy e-mart category spellings on products and subcategories to 'l-mart'."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report what would change",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        products = Product.objects.filter(alias_filter())
        subcategories = Subcategory.objects.filter(alias_filter())

        if dry_run:
            self.stdout.write(self.style.WARNING("Dry run: no changes will be saved"))
            self.stdout.write(f"Products to update: {products.count()}")
            self.stdout.write(f"Subcategories to update: {subcategories.count()}")
            return

        with transaction.atomic():
            product_count = products.update(category=LMART)

            # A subcategory that already exists under l-mart absorbs its alias twin
            existing = set(Subcategory.objects.filter(category=LMART).values_list("name", flat=True))
            renamed, merged = 0, 0
            for subcategory in subcategories:
                if subcategory.name in existing:
                    subcategory.delete()
                    merged += 1
                    continue
                subcategory.category = LMART
                subcategory.save(update_fields=["category"])
                existing.add(subcategory.name)
                renamed += 1

        logger.info(f"Category aliases migrated: {product_count} products, {renamed} subcategories, {merged} merged")
        self.stdout.write(self.style.SUCCESS(f"Products updated: {product_count}"))
        self.stdout.write(self.style.SUCCESS(f"Subcategories updated: {renamed} (merged {merged} duplicates)"))
