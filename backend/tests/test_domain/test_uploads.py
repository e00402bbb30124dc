"""
Unit tests for upload validation

Author: Customer Connect Team
Date: 2025-11-07
"""
import pytest

from app.core.exceptions import FormValidationError
from app.domain.uploads import Upload, upload_error, validate_uploads

MB = 1024 * 1024


def upload(field="product_image1", content_type="image/png", size=10, filename="file.png"):
    return Upload(field=field, filename=filename, content=b"x" * size, content_type=content_type)


class TestUploadRules:

    def test_product_image_types(self):
        assert upload_error(upload(content_type="image/jpeg"), "product_image") is None
        assert upload_error(upload(content_type="image/gif"), "product_image") == (
            "Please select a valid image file (JPEG, PNG) for product_image1"
        )

    def test_research_images_allow_webp(self):
        assert upload_error(upload("research_image1", "image/webp"), "research_image") is None

    def test_document_types(self):
        assert upload_error(upload("document", "application/pdf"), "document") is None
        assert upload_error(upload("document", "text/plain"), "document") == (
            "Please select a valid document file (PDF, DOC, DOCX, XLS, XLSX)"
        )

    def test_news_image_accepts_any_image(self):
        assert upload_error(upload("image", "image/svg+xml"), "news_image") is None
        assert upload_error(upload("image", "application/pdf"), "news_image") == "Please select an image file"

    def test_attachments_are_unrestricted_by_type(self):
        assert upload_error(upload("attachments", "application/zip"), "attachment") is None

    def test_size_limit(self):
        too_big = upload(size=5 * MB + 1)

        assert upload_error(too_big, "product_image") == "File size should be less than 5MB for product_image1"
        assert upload_error(upload(size=5 * MB), "product_image") is None


class TestValidateUploads:

    def test_errors_keyed_by_field(self):
        # Arrange
        uploads = [
            upload("research_image1", "image/png"),
            upload("document", "text/plain"),
        ]
        kinds = {"research_image1": "research_image", "document": "document"}

        # Act
        with pytest.raises(FormValidationError) as exc_info:
            validate_uploads(uploads, kinds)

        # Assert
        assert list(exc_info.value.errors) == ["document"]

    def test_valid_uploads_returned(self):
        uploads = [upload()]

        assert validate_uploads(uploads, {}, "product_image") == uploads

    def test_as_httpx_file(self):
        assert upload().as_httpx_file() == ("product_image1", ("file.png", b"x" * 10, "image/png"))
