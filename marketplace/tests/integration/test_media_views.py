from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Banner, Poster, Subcategory
from marketplace.tests.factories import AdminFactory, ProductFactory, SubcategoryFactory


def image(name="banner.png"):
    return SimpleUploadedFile(name, b"\x89PNG fake", content_type="image/png")


class SubcategoryViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.admin = AdminFactory()

    def test_public_list_by_category_alias(self):
        SubcategoryFactory(name="Shirts", category="l-mart")
        SubcategoryFactory(name="Hidden", category="l-mart", is_active=False)
        SubcategoryFactory(name="Flyers", category="printing")

        response = self.client.get(reverse("marketplace:subcategories_by_category", args=["lmart"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([s["name"] for s in response.data], ["Shirts"])

    def test_create_with_image(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(
            reverse("marketplace:subcategory_create"),
            {"name": "Posters", "category": "Printing", "image": image()},
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        subcategory = Subcategory.objects.get(name="Posters")
        self.assertEqual(subcategory.category, "printing")
        self.assertTrue(subcategory.image_url.startswith("https://mock-storage.local/subcategories/"))

    def test_create_survives_image_upload_failure(self):
        container.storage().fail_uploads = True
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(
            reverse("marketplace:subcategory_create"),
            {"name": "Posters", "category": "printing", "image": image()},
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Subcategory.objects.get(name="Posters").image_url, "")

    def test_create_duplicate(self):
        SubcategoryFactory(name="Shirts", category="l-mart")
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(
            reverse("marketplace:subcategory_create"), {"name": "shirts", "category": "emart"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["message"], "Subcategory already exists for this category")

    def test_create_missing_fields(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(reverse("marketplace:subcategory_create"), {"name": "Only"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Name and category are required")

    def test_delete_removes_stored_image(self):
        subcategory = SubcategoryFactory(image_key="subcategories/a.png")
        self.client.force_authenticate(user=self.admin)

        response = self.client.delete(reverse("marketplace:subcategory_delete", args=[subcategory.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("subcategories/a.png", container.storage().deleted_keys)
        self.assertFalse(Subcategory.objects.exists())


class BannerPosterViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.client.force_authenticate(user=AdminFactory())

    def test_create_banner_linked_to_product(self):
        product = ProductFactory(category="news")

        response = self.client.post(
            reverse("marketplace:banners"),
            {"name": "Sale", "image_title": "Big sale", "product_id": str(product.id), "image": image()},
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        banner = Banner.objects.get()
        self.assertEqual(banner.product, product)
        self.assertEqual(banner.category, "news")

    def test_create_banner_requires_image(self):
        response = self.client.post(reverse("marketplace:banners"), {"name": "Sale"}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Image upload failed")

    def test_create_banner_bad_product_id(self):
        response = self.client.post(
            reverse("marketplace:banners"), {"product_id": "nope", "image": image()}, format="multipart"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid product_id")

    def test_banner_list_is_public(self):
        self.client.post(reverse("marketplace:banners"), {"image": image()}, format="multipart")
        self.client.force_authenticate(user=None)

        response = self.client.get(reverse("marketplace:banners"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_public_lists_ignore_stale_token(self):
        SubcategoryFactory(name="Shirts", category="l-mart")
        self.client.force_authenticate(user=None)
        self.client.credentials(HTTP_AUTHORIZATION="Bearer expired.or.garbage")

        banners = self.client.get(reverse("marketplace:banners"))
        posters = self.client.get(reverse("marketplace:posters"))
        subcategories = self.client.get(reverse("marketplace:subcategories_by_category", args=["l-mart"]))

        self.assertEqual(banners.status_code, status.HTTP_200_OK)
        self.assertEqual(posters.status_code, status.HTTP_200_OK)
        self.assertEqual([s["name"] for s in subcategories.data], ["Shirts"])

    def test_poster_create_and_delete(self):
        created = self.client.post(reverse("marketplace:posters"), {"title": "Diwali", "image": image()}, format="multipart")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        poster = Poster.objects.get()

        response = self.client.delete(reverse("marketplace:poster_delete", args=[poster.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Poster.objects.exists())
        self.assertIn(poster.storage_key, container.storage().deleted_keys)
