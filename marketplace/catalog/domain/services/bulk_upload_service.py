"""
BulkUploadService - create products from a CSV or XLSX sheet.

Rows are validated one by one; valid rows are inserted and every problem is
reported back as ``"Row N: ..."`` (the first 50 only).
"""

import csv
import io
import os
import zipfile
from typing import Any, Dict, List, Optional, Tuple

from django.db import DatabaseError, transaction
from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from marketplace.catalog.domain.models import DEFAULT_PRODUCT_IMAGE, Product
from marketplace.catalog.domain.services.product_input import (
    build_color_variants,
    clean_url,
    parse_decimal,
    parse_flag,
    parse_list,
)
from marketplace.categories import CATEGORIES, normalize_category
from marketplace.infra.observability import bulk_upload_rows_total
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
ALLOWED_EXTENSIONS = (".csv", ".xlsx", ".xls")
MAX_REPORTED_ERRORS = 50
LIST_SEPARATORS = ",;"

TEMPLATE_COLUMNS = [
    "name",
    "description",
    "price",
    "offer_price",
    "original_price",
    "discount",
    "category",
    "subcategory",
    "color_variants",
    "size_variants",
    "image",
    "images",
    "in_stock",
    "stock_quantity",
    "is_active",
]

TEMPLATE_ROWS = [
    {
        "name": "Product1",
        "description": "Sample description 1",
        "price": 110,
        "offer_price": 100,
        "original_price": "",
        "discount": 0,
        "category": "localmarket",
        "subcategory": "general",
        "color_variants": "green;red;gray",
        "size_variants": "m;l;xl",
        "image": "https://example.com/images/product1-main.jpg",
        "images": "https://example.com/images/product1-red.jpg;https://example.com/images/product1-gray.jpg",
        "in_stock": True,
        "stock_quantity": 101,
        "is_active": True,
    },
    {
        "name": "Product2",
        "description": "Sample description 2",
        "price": 120,
        "offer_price": 110,
        "original_price": "",
        "discount": 0,
        "category": "printing",
        "subcategory": "general",
        "color_variants": "black;white;blue",
        "size_variants": "l;xl",
        "image": "https://example.com/images/product2-main.jpg",
        "images": "https://example.com/images/product2-white.jpg;https://example.com/images/product2-blue.jpg",
        "in_stock": True,
        "stock_quantity": 102,
        "is_active": True,
    },
    {
        "name": "Product3",
        "description": "Sample description 3",
        "price": 130,
        "offer_price": 120,
        "original_price": "",
        "discount": 0,
        "category": "printing",
        "subcategory": "general",
        "color_variants": "red;black;blue",
        "size_variants": "l;xl",
        "image": "https://example.com/images/product3-main.jpg",
        "images": "https://example.com/images/product3-black.jpg;https://example.com/images/product3-blue.jpg",
        "in_stock": True,
        "stock_quantity": 102,
        "is_active": True,
    },
]


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class BulkUploadService(BaseService):
    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @staticmethod
    def read_csv(content: bytes) -> List[Dict[str, Any]]:
        reader = csv.DictReader(io.StringIO(content.decode("utf-8-sig")))
        return [row for row in reader if any(_text(v) for v in row.values())]

    @staticmethod
    def read_xlsx(content: bytes) -> List[Dict[str, Any]]:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        try:
            sheet = workbook.worksheets[0]
            rows = sheet.iter_rows(values_only=True)
            header = next(rows, None)
            if not header:
                return []
            keys = [_text(cell) for cell in header]
            records = []
            for values in rows:
                if not any(_text(v) for v in values):
                    continue
                records.append({key: value for key, value in zip(keys, values) if key})
            return records
        finally:
            workbook.close()

    def _read_rows(self, uploaded_file) -> ServiceResult[List[Dict[str, Any]]]:
        ext = os.path.splitext(getattr(uploaded_file, "name", "") or "")[1].lower()
        if ext not in ALLOWED_EXTENSIONS:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Only CSV and Excel files are allowed")
        if ext == ".xls":
            return service_err(
                ErrorCodes.VALIDATION_ERROR, "Legacy .xls files are not supported. Please upload .xlsx or .csv"
            )
        if (getattr(uploaded_file, "size", 0) or 0) > MAX_UPLOAD_BYTES:
            return service_err(ErrorCodes.FILE_TOO_LARGE, "File size must be 10MB or less")

        content = uploaded_file.read()
        if ext == ".csv":
            try:
                return service_ok(self.read_csv(content))
            except (UnicodeDecodeError, csv.Error) as e:
                return service_err(ErrorCodes.VALIDATION_ERROR, f"Failed to parse CSV file: {e}")
        try:
            return service_ok(self.read_xlsx(content))
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Failed to parse Excel file: {e}")

    # ------------------------------------------------------------------
    # Validation and conversion
    # ------------------------------------------------------------------

    @staticmethod
    def validate_row(row: Dict[str, Any], index: int) -> List[str]:
        errors = []
        label = f"Row {index + 1}"
        for field in ("name", "price", "category", "subcategory"):
            if not _text(row.get(field)):
                errors.append(f"{label}: {field} is required")

        numeric = (("price", "Price"), ("offer_price", "Offer price"), ("original_price", "Original price"))
        for field, title in numeric:
            if _text(row.get(field)):
                try:
                    parse_decimal(_text(row.get(field)))
                except ValueError:
                    errors.append(f"{label}: {title} must be a valid number")

        if _text(row.get("discount")):
            try:
                discount = parse_decimal(_text(row.get("discount")))
                if discount < 0 or discount > 100:
                    raise ValueError
            except ValueError:
                errors.append(f"{label}: Discount must be a number between 0 and 100")

        if _text(row.get("stock_quantity")):
            try:
                int(_text(row.get("stock_quantity")))
            except ValueError:
                errors.append(f"{label}: Stock quantity must be a valid number")

        category = normalize_category(_text(row.get("category")))
        if category and category not in CATEGORIES:
            errors.append(f"{label}: Category must be one of: {', '.join(CATEGORIES)}")
        return errors

    @staticmethod
    def build_product(row: Dict[str, Any], user, seller=None) -> Product:
        """Unsaved Product for a validated row; the main image sits at index 0 for colour mapping."""
        main_image = clean_url(row.get("image")) or None
        extra_images = [clean_url(url) for url in parse_list(_text(row.get("images")), LIST_SEPARATORS)]
        extra_images = [url for url in extra_images if url]
        all_images = [url for url in [main_image, *extra_images] if url]

        colors = parse_list(_text(row.get("color_variants")), LIST_SEPARATORS)
        discount = parse_decimal(_text(row.get("discount")))
        stock = _text(row.get("stock_quantity"))

        return Product(
            name=_text(row.get("name")),
            description=_text(row.get("description")),
            price=parse_decimal(_text(row.get("price"))),
            offer_price=parse_decimal(_text(row.get("offer_price"))),
            original_price=parse_decimal(_text(row.get("original_price"))),
            discount=discount if discount is not None else 0,
            category=normalize_category(_text(row.get("category"))),
            subcategory=_text(row.get("subcategory")),
            color_variants=build_color_variants(colors, all_images),
            size_variants=parse_list(_text(row.get("size_variants")), LIST_SEPARATORS),
            image=main_image or (extra_images[0] if extra_images else DEFAULT_PRODUCT_IMAGE),
            images=extra_images if main_image else extra_images[1:],
            video_url=clean_url(row.get("video_url")),
            in_stock=parse_flag(_text(row.get("in_stock")), default=True),
            stock_quantity=max(0, int(stock)) if stock else 0,
            is_active=parse_flag(_text(row.get("is_active")), default=True),
            created_by=user,
            seller=seller,
            seller_name=seller.seller_name if seller else "",
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @BaseService.log_performance
    def process_upload(self, uploaded_file, user, seller=None) -> ServiceResult[Dict[str, Any]]:
        """
        Validate and insert every row of an uploaded sheet.

        Args:
            uploaded_file: Multipart ``file`` (.csv or .xlsx, at most 10 MB)
            user: Uploading user, stored as ``created_by``
            seller: Seller profile attached to each product (seller uploads)
        """
        if uploaded_file is None:
            return service_err(ErrorCodes.VALIDATION_ERROR, "No file uploaded")

        rows_result = self._read_rows(uploaded_file)
        if not rows_result.ok:
            return rows_result
        rows = rows_result.value
        if not rows:
            return service_err(ErrorCodes.VALIDATION_ERROR, "No data found in file")

        errors: List[str] = []
        prepared: List[Tuple[int, Product]] = []
        for index, row in enumerate(rows):
            row_errors = self.validate_row(row, index)
            if row_errors:
                errors.extend(row_errors)
                continue
            try:
                prepared.append((index, self.build_product(row, user, seller)))
            except (ValueError, TypeError) as e:
                errors.append(f"Row {index + 1}: Error processing product - {e}")

        inserted = 0
        for index, product in prepared:
            try:
                with transaction.atomic():
                    product.save()
                inserted += 1
            except DatabaseError as e:
                errors.append(f"Row {index + 1}: {e}")

        bulk_upload_rows_total.labels(result="success").inc(inserted)
        bulk_upload_rows_total.labels(result="error").inc(len(rows) - inserted)
        self.logger.info(f"Bulk upload by {user.pk}: {inserted}/{len(rows)} rows inserted, {len(errors)} errors")

        return service_ok(
            {
                "message": f"Bulk upload completed. {inserted} products inserted successfully.",
                "success_count": inserted,
                "error_count": len(errors),
                "total_processed": len(prepared),
                "total": len(rows),
                "errors": errors[:MAX_REPORTED_ERRORS],
            }
        )

    @staticmethod
    def build_template() -> bytes:
        """XLSX workbook with a ``Products`` sheet holding the header and three sample rows."""
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Products"
        sheet.append(TEMPLATE_COLUMNS)
        for row in TEMPLATE_ROWS:
            sheet.append([row[column] for column in TEMPLATE_COLUMNS])

        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()
