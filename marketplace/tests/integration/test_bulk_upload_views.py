from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Product
from marketplace.tests.factories import AdminFactory, UserFactory

CSV_HEADER = "name,price,category,subcategory,color_variants,images,stock_quantity\n"


def csv_file(body, name="products.csv"):
    return SimpleUploadedFile(name, (CSV_HEADER + body).encode("utf-8"), content_type="text/csv")


class AdminBulkUploadViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.client.force_authenticate(user=self.admin)
        self.url = reverse("marketplace:bulk_upload")

    def test_valid_rows_are_inserted_and_errors_reported(self):
        body = (
            'Mug,199,emart,kitchen,"red;blue","https://cdn.example.com/r.jpg;https://cdn.example.com/b.jpg",5\n'
            "Broken,abc,printing,cards,,,\n"
            "Toy,20,toys,games,,,\n"
        )

        response = self.client.post(self.url, {"file": csv_file(body)}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["success_count"], 1)
        self.assertEqual(response.data["total"], 3)
        self.assertIn("Row 2: Price must be a valid number", response.data["errors"])
        self.assertIn("Row 3: Category must be one of: l-mart, localmarket, printing, news", response.data["errors"])

        mug = Product.objects.get(name="Mug")
        self.assertEqual(mug.category, "l-mart")
        self.assertEqual(mug.stock_quantity, 5)
        self.assertEqual(mug.created_by, self.admin)
        self.assertIsNone(mug.seller)
        self.assertEqual([v["color"] for v in mug.color_variants], ["red", "blue"])

    def test_missing_file(self):
        response = self.client.post(self.url, {}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "No file uploaded")

    def test_wrong_extension(self):
        upload = SimpleUploadedFile("products.txt", b"name\n", content_type="text/plain")

        response = self.client.post(self.url, {"file": upload}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Only CSV and Excel files are allowed")

    def test_requires_admin(self):
        self.client.force_authenticate(user=UserFactory())

        response = self.client.post(self.url, {"file": csv_file("Mug,1,news,daily,,,\n")}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Product.objects.exists())

    def test_template_download(self):
        response = self.client.get(reverse("marketplace:bulk_upload_template"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response["Content-Type"], "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        self.assertIn('filename="product_upload_template.xlsx"', response["Content-Disposition"])
        self.assertTrue(response.content.startswith(b"PK"))
