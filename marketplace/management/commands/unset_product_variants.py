import logging

from django.core.management.base import BaseCommand

from marketplace.catalog.domain.models import Product

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Clears colour and size variants from every product."

    def handle(self, *args, **options):
        updated = Product.objects.update(color_variants=[], size_variants=[])
        logger.info(f"Cleared variants on {updated} products")
        self.stdout.write(self.style.SUCCESS(f"Unset variants from {updated} products"))
