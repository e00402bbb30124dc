"""
CRUD View Service
The one screen pattern of the console

Every management screen does the same thing:
    fetch list -> render table -> handle click -> call API -> refetch

This service implements that flow once. Each screen configures it with
the REST resource, the form model, the key its list response uses, and a
decorator that adds display-only fields to each row.

Author: Customer Connect Team
Date: 2025-11-05
"""
import logging
from typing import Any, Callable, Dict, Iterable, Optional, Type

from app.connectors.api_service import ResourceClient
from app.core.config import settings
from app.core.exceptions import ApiError, AuthenticationRequired
from app.domain.pagination import PageState, extract_pagination
from app.domain.uploads import Upload, validate_uploads
from app.domain.validation import ConsoleForm, validate_form

logger = logging.getLogger(__name__)

Decorator = Callable[[Dict[str, Any]], Dict[str, Any]]


def _identity(row: Dict[str, Any]) -> Dict[str, Any]:
    return row


def unwrap_record(response: Any) -> Any:
    """Detail responses are either the record or {"data": record}"""
    if isinstance(response, dict) and isinstance(response.get("data"), dict):
        return response["data"]
    return response


class CrudViewService:
    """
    List/search/paginate, create, edit, view and delete for one resource

    Validation always happens before the API call: an invalid form raises
    FormValidationError and the backend is never contacted.
    """

    def __init__(
        self,
        resource: ResourceClient,
        form_model: Optional[Type[ConsoleForm]],
        list_key: str,
        decorate: Decorator = None,
        page_size: int = None,
        upload_kinds: Dict[str, str] = None,
        default_upload_kind: str = "attachment"
    ):
        self.resource = resource
        self.form_model = form_model
        self.list_key = list_key
        self.decorate = decorate or _identity
        self.page_size = page_size or settings.DEFAULT_PAGE_SIZE
        self.upload_kinds = upload_kinds or {}
        self.default_upload_kind = default_upload_kind

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_page(
        self,
        page: int = 1,
        search: str = "",
        filters: Optional[Dict[str, Any]] = None,
        limit: int = None
    ) -> Dict[str, Any]:
        """
        Fetch one page of the list

        Returns:
            {"items": [...decorated rows], "pagination": {...}}
        """
        state = PageState(
            current_page=max(int(page or 1), 1),
            limit=limit or self.page_size,
            search=search or "",
            filters={k: v for k, v in (filters or {}).items() if v not in (None, "")},
        )

        response = await self.resource.list(state.query_params())
        items, total_pages = extract_pagination(response, self.list_key, state.limit)
        state.update_total(total_pages)

        return {
            "items": [self.decorate(dict(item)) for item in items if isinstance(item, dict)],
            "pagination": state.to_dict(settings.MAX_VISIBLE_PAGES),
        }

    async def view(self, item_id: Any) -> Any:
        record = unwrap_record(await self.resource.get(item_id))
        if isinstance(record, dict):
            return self.decorate(dict(record))
        return record

    async def stats(self) -> Optional[Any]:
        """Statistics cards; a failure hides the cards instead of the page"""
        try:
            return await self.resource.stats()
        except AuthenticationRequired:
            raise
        except ApiError as e:
            logger.warning(f"Failed to fetch stats for {self.resource.path}: {e.message}")
            return None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def _validate(self, payload: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        if self.form_model is None:
            raise TypeError(f"{self.resource.path} is read-only")
        form = validate_form(self.form_model, payload, creating=creating)
        return form.to_payload()

    def _validate_uploads(self, uploads: Iterable[Upload]) -> list:
        checked = validate_uploads(uploads, self.upload_kinds, self.default_upload_kind)
        return [upload.as_httpx_file() for upload in checked]

    async def create(self, payload: Dict[str, Any]) -> Any:
        data = self._validate(payload, creating=True)
        return await self.resource.create(data)

    async def update(self, item_id: Any, payload: Dict[str, Any]) -> Any:
        data = self._validate(payload, creating=False)
        return await self.resource.update(item_id, data)

    async def create_with_files(self, payload: Dict[str, Any], uploads: Iterable[Upload]) -> Any:
        data = self._validate(payload, creating=True)
        files = self._validate_uploads(uploads)
        return await self.resource.create_multipart(data, files)

    async def update_with_files(self, item_id: Any, payload: Dict[str, Any], uploads: Iterable[Upload]) -> Any:
        data = self._validate(payload, creating=False)
        files = self._validate_uploads(uploads)
        return await self.resource.update_multipart(item_id, data, files)

    async def delete(self, item_id: Any) -> Any:
        return await self.resource.delete(item_id)
