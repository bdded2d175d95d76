from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from marketplace.models import Product, Subcategory
from marketplace.tests.factories import ProductFactory, SubcategoryFactory


class MigrateCategoryAliasesTest(TestCase):
    def setUp(self):
        # Rows written by older clients bypass normalization
        self.legacy = [ProductFactory(category=alias) for alias in ("emart", "E-Mart", "lmart")]
        self.printing = ProductFactory(category="printing")
        SubcategoryFactory(name="Shirts", category="l-mart")
        SubcategoryFactory(name="Shirts", category="emart")
        SubcategoryFactory(name="Toys", category="e-mart")

    def test_dry_run_changes_nothing(self):
        out = StringIO()
        call_command("migrate_category_aliases", "--dry-run", stdout=out)

        self.assertIn("Products to update: 3", out.getvalue())
        self.assertIn("Subcategories to update: 2", out.getvalue())
        self.assertEqual(Product.objects.filter(category="l-mart").count(), 0)
        self.assertEqual(Subcategory.objects.count(), 3)

    def test_rewrites_aliases_and_merges_duplicates(self):
        out = StringIO()
        call_command("migrate_category_aliases", stdout=out)

        self.assertEqual(Product.objects.filter(category="l-mart").count(), 3)
        self.assertEqual(Product.objects.get(pk=self.printing.pk).category, "printing")
        self.assertEqual(
            sorted(Subcategory.objects.values_list("category", "name")),
            [("l-mart", "Shirts"), ("l-mart", "Toys")],
        )
        self.assertIn("Products updated: 3", out.getvalue())
        self.assertIn("merged 1 duplicates", out.getvalue())


class UnsetProductVariantsTest(TestCase):
    def test_clears_variants(self):
        ProductFactory(color_variants=[{"color": "red", "images": []}], size_variants=["M"])
        ProductFactory(size_variants=["L"])

        out = StringIO()
        call_command("unset_product_variants", stdout=out)

        for product in Product.objects.all():
            self.assertEqual(product.color_variants, [])
            self.assertEqual(product.size_variants, [])
        self.assertIn("Unset variants from 2 products", out.getvalue())
