from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Product
from marketplace.tests.factories import AdminFactory, ProductFactory, SellerFactory, UserFactory


def image(name="photo.jpg"):
    return SimpleUploadedFile(name, b"\xff\xd8\xff fake jpeg", content_type="image/jpeg")


class ProductStorefrontViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        ProductFactory(name="Blue Shirt", category="l-mart", is_featured=True)
        ProductFactory(name="Blue Jeans", category="l-mart", in_stock=False)
        ProductFactory(name="Red Shirt", category="localmarket")
        ProductFactory(name="Blue Hidden", category="l-mart", is_active=False)

    def test_list_active_products(self):
        response = self.client.get(reverse("marketplace:products"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pagination"], {"current": 1, "pages": 1, "total": 3})
        self.assertNotIn("Blue Hidden", [p["name"] for p in response.data["data"]])

    def test_search_matches_name_prefix_of_first_word(self):
        response = self.client.get(reverse("marketplace:products"), {"search": "blue anything"})

        self.assertEqual({p["name"] for p in response.data["data"]}, {"Blue Shirt", "Blue Jeans"})

    def test_boolean_filters(self):
        featured = self.client.get(reverse("marketplace:products"), {"featured": "true"})
        out_of_stock = self.client.get(reverse("marketplace:products"), {"in_stock": "false"})
        ignored = self.client.get(reverse("marketplace:products"), {"in_stock": "yes"})

        self.assertEqual([p["name"] for p in featured.data["data"]], ["Blue Shirt"])
        self.assertEqual([p["name"] for p in out_of_stock.data["data"]], ["Blue Jeans"])
        self.assertEqual(ignored.data["pagination"]["total"], 3)

    def test_pagination(self):
        response = self.client.get(reverse("marketplace:products"), {"page": 2, "limit": 2})

        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["pagination"], {"current": 2, "pages": 2, "total": 3})

    def test_category_alias(self):
        response = self.client.get(reverse("marketplace:products_by_category", args=["emart"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pagination"]["total"], 2)

    def test_product_detail(self):
        product = ProductFactory(name="Poster", price=Decimal("49.00"))

        response = self.client.get(reverse("marketplace:product_detail", args=[product.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Poster")
        self.assertEqual(response.data["price"], Decimal("49.00"))

    def test_product_detail_not_found(self):
        response = self.client.get(
            reverse("marketplace:product_detail", args=["00000000-0000-0000-0000-000000000000"])
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Product not found"})

    def test_storefront_ignores_stale_token(self):
        product = ProductFactory(name="Poster")
        self.client.credentials(HTTP_AUTHORIZATION="Bearer expired.or.garbage")

        listing = self.client.get(reverse("marketplace:products"))
        by_category = self.client.get(reverse("marketplace:products_by_category", args=["l-mart"]))
        detail = self.client.get(reverse("marketplace:product_detail", args=[product.id]))

        self.assertEqual(listing.status_code, status.HTTP_200_OK)
        self.assertEqual(listing.data["pagination"]["total"], 4)
        self.assertEqual(by_category.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.status_code, status.HTTP_200_OK)


class ProductAdminViewTest(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.admin = AdminFactory()
        self.client.force_authenticate(user=self.admin)

    def test_create_product_with_images_and_colours(self):
        response = self.client.post(
            reverse("marketplace:products"),
            {
                "name": "Printed Mug",
                "price": "299",
                "category": "E-Mart",
                "color_variants": "Red,Blue",
                "size_variants": '["350ml"]',
                "stock_quantity": "4",
                "image": image("main.jpg"),
                "images": [image("red.jpg"), image("blue.jpg")],
            },
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Product created successfully")
        product = Product.objects.get(name="Printed Mug")
        self.assertEqual(product.category, "l-mart")
        self.assertEqual(product.created_by, self.admin)
        self.assertEqual(len(product.images), 2)
        self.assertEqual(product.color_variants[0], {"color": "red", "images": [product.images[0]]})
        self.assertEqual(product.size_variants, ["350ml"])
        self.assertEqual(len(container.storage().objects), 3)

    def test_create_product_validation_error(self):
        response = self.client.post(
            reverse("marketplace:products"), {"name": "Mug", "price": "10", "category": "toys"}, format="multipart"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Invalid category")

    def test_create_requires_admin(self):
        self.client.force_authenticate(user=UserFactory())

        response = self.client.post(reverse("marketplace:products"), {"name": "Mug"}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Admin access required")

    def test_create_without_token(self):
        self.client.force_authenticate(user=None)

        response = self.client.post(reverse("marketplace:products"), {"name": "Mug"}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Access token required"})

    def test_create_with_stale_token(self):
        self.client.force_authenticate(user=None)
        self.client.credentials(HTTP_AUTHORIZATION="Bearer expired.or.garbage")

        response = self.client.post(reverse("marketplace:products"), {"name": "Mug"}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Invalid or expired token")

    def test_update_appends_images(self):
        product = ProductFactory(images=["https://cdn.example.com/old.jpg"])

        response = self.client.put(
            reverse("marketplace:product_update", args=[product.id]),
            {"price": "120", "images": [image("new.jpg")]},
            format="multipart",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertEqual(product.price, Decimal("120"))
        self.assertEqual(product.images[0], "https://cdn.example.com/old.jpg")
        self.assertEqual(len(product.images), 2)
        self.assertEqual(product.updated_by, self.admin)

    def test_toggle_status(self):
        product = ProductFactory(is_active=True)

        response = self.client.patch(reverse("marketplace:product_toggle_status", args=[product.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertFalse(product.is_active)

    def test_delete_product(self):
        product = ProductFactory()

        response = self.client.delete(reverse("marketplace:product_delete", args=[product.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Product.objects.filter(pk=product.pk).exists())

    def test_admin_list_includes_inactive(self):
        ProductFactory(is_active=False)
        ProductFactory(category="news")

        response = self.client.get(reverse("marketplace:products_admin"), {"category": "news"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pagination"]["total"], 1)

    def test_delete_all(self):
        ProductFactory.create_batch(3)

        response = self.client.delete(reverse("marketplace:products_delete_all"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Product.objects.count(), 0)


class SellerProductListViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.seller = SellerFactory()
        self.other_seller = SellerFactory()
        ProductFactory(seller=self.seller, created_by=self.seller.user)
        ProductFactory(seller=self.other_seller, created_by=self.other_seller.user)

    def test_admin_sees_any_seller(self):
        self.client.force_authenticate(user=AdminFactory())

        response = self.client.get(reverse("marketplace:products_seller", args=[self.other_seller.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_seller_sees_own_products(self):
        self.client.force_authenticate(user=self.seller.user)

        response = self.client.get(reverse("marketplace:products_seller", args=[self.seller.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["data"]), 1)

    def test_pending_seller_is_blocked(self):
        self.seller.verification_status = "pending"
        self.seller.save()
        self.client.force_authenticate(user=self.seller.user)

        response = self.client.get(reverse("marketplace:products_seller", args=[self.seller.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], "Seller not approved by admin yet")

    def test_seller_cannot_see_other_seller(self):
        self.client.force_authenticate(user=self.seller.user)

        response = self.client.get(reverse("marketplace:products_seller", args=[self.other_seller.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
