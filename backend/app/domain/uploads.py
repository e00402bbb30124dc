"""
Upload validation

Files attached to product, market research, meeting and news forms are
checked for type and size before the multipart request is built.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from app.core.config import settings
from app.core.exceptions import FormValidationError

PRODUCT_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png")
RESEARCH_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")
DOCUMENT_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)

# kind -> (accepted types, message for anything else)
UPLOAD_RULES: Dict[str, Tuple[Optional[Tuple[str, ...]], str]] = {
    "product_image": (PRODUCT_IMAGE_TYPES, "Please select a valid image file (JPEG, PNG) for {field}"),
    "research_image": (
        RESEARCH_IMAGE_TYPES,
        "Please select a valid image file (JPEG, JPG, PNG, GIF, WebP) for {field}",
    ),
    "document": (DOCUMENT_TYPES, "Please select a valid document file (PDF, DOC, DOCX, XLS, XLSX)"),
    # news images accept any image/* type
    "news_image": (None, "Please select an image file"),
    # meeting attachments are not type-restricted
    "attachment": ((), ""),
}


@dataclass
class Upload:
    """One file received by the console, ready to forward"""

    field: str
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    def as_httpx_file(self) -> Tuple[str, Tuple[str, bytes, str]]:
        return (self.field, (self.filename, self.content, self.content_type))


def upload_error(upload: Upload, kind: str, max_bytes: int = None) -> Optional[str]:
    """Message describing why an upload is rejected, or None"""
    accepted, message = UPLOAD_RULES[kind]
    content_type = (upload.content_type or "").lower()

    if accepted is None:
        if not content_type.startswith("image/"):
            return message.format(field=upload.field)
    elif accepted and content_type not in accepted:
        return message.format(field=upload.field)

    limit = max_bytes or settings.MAX_UPLOAD_BYTES
    if upload.size > limit:
        megabytes = limit // (1024 * 1024)
        return f"File size should be less than {megabytes}MB for {upload.field}"

    return None


def validate_uploads(uploads: Iterable[Upload], kinds: Dict[str, str], default_kind: str = "attachment") -> List[Upload]:
    """
    Check every upload against the rule for its field

    Args:
        uploads: Files received with the form
        kinds: field name -> rule kind (see UPLOAD_RULES)
        default_kind: Rule for fields not listed in kinds

    Raises:
        FormValidationError: keyed by the offending field names
    """
    uploads = list(uploads)
    errors = {}
    for upload in uploads:
        message = upload_error(upload, kinds.get(upload.field, default_kind))
        if message:
            errors.setdefault(upload.field, message)

    if errors:
        raise FormValidationError(errors)
    return uploads
