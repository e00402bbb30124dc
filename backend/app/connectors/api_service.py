"""
REST Backend Connector
Single HTTP client wrapper used by every console screen

Handles:
- Bearer token authentication (attach, store on login, clear on 401)
- JSON and multipart request bodies
- Uniform error convention: non-2xx -> ApiError carrying the parsed body

Author: Customer Connect Team
Date: 2025-11-03
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import httpx

from app.core.config import settings
from app.core.exceptions import ApiError, AuthenticationRequired, BackendUnavailable
from app.core.token_store import TokenStore

logger = logging.getLogger(__name__)

# (field name, (filename, content, content type))
UploadFile = Tuple[str, Tuple[str, bytes, str]]


def clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop unset query parameters so the backend sees only real filters"""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None and value != ""}


class ResourceClient:
    """
    CRUD endpoints of one REST resource

    Every resource follows the same shape:
        GET    /<path>            list (query params)
        GET    /<path>/<id>       detail
        POST   /<path>            create
        PUT    /<path>/<id>       update
        DELETE /<path>/<id>       delete
        GET    /<path>/stats      statistics
    """

    def __init__(self, api: "ApiService", path: str):
        self.api = api
        self.path = path.rstrip("/")

    def _item_path(self, item_id: Any) -> str:
        return f"{self.path}/{item_id}"

    async def list(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.api.request(self.path, params=params)

    async def get(self, item_id: Any) -> Any:
        return await self.api.request(self._item_path(item_id))

    async def create(self, data: Dict[str, Any]) -> Any:
        return await self.api.request(self.path, method="POST", json=data)

    async def update(self, item_id: Any, data: Dict[str, Any]) -> Any:
        return await self.api.request(self._item_path(item_id), method="PUT", json=data)

    async def delete(self, item_id: Any) -> Any:
        return await self.api.request(self._item_path(item_id), method="DELETE")

    async def stats(self) -> Any:
        return await self.api.request(f"{self.path}/stats")

    async def create_multipart(self, fields: Dict[str, Any], files: Iterable[UploadFile] = ()) -> Any:
        return await self.api.request(self.path, method="POST", data=fields, files=list(files))

    async def update_multipart(
        self,
        item_id: Any,
        fields: Dict[str, Any],
        files: Iterable[UploadFile] = ()
    ) -> Any:
        return await self.api.request(
            self._item_path(item_id), method="PUT", data=fields, files=list(files)
        )

    async def get_path(self, suffix: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.api.request(f"{self.path}/{suffix.lstrip('/')}", params=params)


class ApiService:
    """
    Client for the Customer Connect REST backend

    One instance is shared by the whole console; the token store it holds
    is the single global session.
    """

    def __init__(
        self,
        base_url: str = None,
        token_store: TokenStore = None,
        timeout: float = None,
        transport: httpx.AsyncBaseTransport = None
    ):
        """
        Initialize the REST client

        Args:
            base_url: Backend API root (e.g. 'http://localhost:5000/api')
            token_store: Session storage; a fresh in-memory store by default
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token_store = token_store if token_store is not None else TokenStore()
        self.timeout = timeout or settings.API_TIMEOUT
        self.transport = transport

        self.users = ResourceClient(self, "/users")
        self.roles = ResourceClient(self, "/roles")
        self.products = ResourceClient(self, "/products")
        self.sales = ResourceClient(self, "/sales")
        self.orders = ResourceClient(self, "/orders")
        self.meetings = ResourceClient(self, "/meetings")
        self.market_research = ResourceClient(self, "/market-research")
        self.payments = ResourceClient(self, "/payments")
        self.statements = ResourceClient(self, "/statements")
        self.invoice_to_delivery = ResourceClient(self, "/invoice-to-delivery")
        self.sap_materials = ResourceClient(self, "/sap-materials")
        self.social_media = ResourceClient(self, "/settings/social-media")
        self.news = ResourceClient(self, "/news")

    # ------------------------------------------------------------------
    # Token handling
    # ------------------------------------------------------------------

    @property
    def token(self) -> Optional[str]:
        return self.token_store.token

    def set_token(self, token: Optional[str], user: Optional[Dict[str, Any]] = None) -> None:
        self.token_store.set(token, user)

    def get_headers(self, json_body: bool = True) -> Dict[str, str]:
        """
        Build request headers

        Multipart bodies must not carry a JSON content type; httpx sets the
        boundary header itself.
        """
        headers = {}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    # ------------------------------------------------------------------
    # Core request
    # ------------------------------------------------------------------

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[List[UploadFile]] = None
    ) -> Any:
        """
        Send one request to the backend

        Returns:
            Parsed JSON body ({} for an empty body)

        Raises:
            AuthenticationRequired: backend answered 401 (token is cleared)
            ApiError: any other non-2xx answer, or an unparseable 2xx body
            BackendUnavailable: transport failure
        """
        url = f"{self.base_url}{endpoint}"
        multipart = data is not None or bool(files)

        request_kwargs: Dict[str, Any] = {
            "params": clean_params(params),
            "headers": self.get_headers(json_body=not multipart),
        }
        if multipart:
            fields = {k: _form_value(v) for k, v in (data or {}).items()}
            if files:
                request_kwargs["data"] = fields
                request_kwargs["files"] = files
            else:
                # httpx url-encodes bare data; filename-less parts keep it multipart
                request_kwargs["files"] = [(k, (None, v)) for k, v in fields.items()]
        elif json is not None:
            request_kwargs["json"] = json

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, **request_kwargs)
        except httpx.RequestError as e:
            logger.error(f"API request failed: {method} {endpoint} - {e}")
            raise BackendUnavailable(f"Backend unavailable: {e}") from e

        # If unauthorized, clear token; the console redirects to login
        if response.status_code == 401:
            logger.warning(f"API request unauthorized: {method} {endpoint}")
            self.set_token(None)
            raise AuthenticationRequired(response=_parse_body(response))

        body = _parse_body(response)

        if not response.is_success:
            payload = body if isinstance(body, dict) else {}
            message = (
                payload.get("error")
                or payload.get("message")
                or f"HTTP error! status: {response.status_code}"
            )
            logger.error(f"API request failed: {method} {endpoint} - {response.status_code} {message}")
            raise ApiError(message, status=response.status_code, response=body)

        if body is _INVALID:
            logger.error(f"API request failed: {method} {endpoint} - invalid JSON body")
            raise ApiError("Invalid JSON response from backend", status=502, response={})

        return body

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def login(self, credentials: Dict[str, Any]) -> Any:
        response = await self.request("/auth/login", method="POST", json=credentials)

        # Store the token if login successful; it sits at the top level
        # or under "data" next to the user
        session = response if isinstance(response, dict) else {}
        if not session.get("token") and isinstance(session.get("data"), dict):
            session = session["data"]
        if session.get("token"):
            self.set_token(session["token"], session.get("user") or {})

        return response

    async def logout(self) -> None:
        """Tell the backend we are leaving; the local session is cleared regardless"""
        try:
            await self.request("/auth/logout", method="POST")
        except ApiError as e:
            logger.warning(f"Logout error: {e.message}")
        finally:
            self.set_token(None)

    async def get_my_role_permissions(self) -> Any:
        return await self.request("/auth/my-role-permissions")

    # ------------------------------------------------------------------
    # Named endpoints
    # ------------------------------------------------------------------

    async def get_active_roles(self) -> Any:
        return await self.roles.get_path("active")

    async def update_order_status(self, order_id: Any, status: str) -> Any:
        return await self.request(f"/orders/{order_id}/status", method="PATCH", json={"status": status})

    async def get_orders_by_customer(self, customer_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(f"/orders/customer/{quote(customer_name, safe='')}", params=params)

    async def get_statements_by_customer(self, customer_code: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.statements.get_path(f"customer/{customer_code}", params)

    async def get_statement_summary(self) -> Any:
        return await self.statements.get_path("summary")

    async def get_customer_codes(self) -> Any:
        return await self.request("/customers/codes")

    # Dashboard widgets never raise: a failed widget is reported, not fatal

    async def _soft_request(self, label: str, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self.request(endpoint, params=params)
        except AuthenticationRequired:
            raise
        except ApiError as e:
            logger.warning(f"Error getting {label}: {e.message}")
            return {"success": False, "error": e.message}

        data = response.get("data") if isinstance(response, dict) else None
        return {"success": True, "data": data or response}

    async def get_top_products(self, limit: int = 3, customer_code: str = None) -> Dict[str, Any]:
        return await self._soft_request(
            "top products",
            "/products/top/by-sales",
            {"limit": limit, "customer_code": customer_code}
        )

    async def get_latest_news(self, limit: int = 5) -> Dict[str, Any]:
        return await self._soft_request(
            "latest news",
            "/news",
            {"limit": limit, "sort": "created_date", "order": "desc"}
        )

    async def get_latest_market_research(self, limit: int = 3) -> Dict[str, Any]:
        return await self._soft_request(
            "latest market research",
            "/market-research",
            {"limit": limit, "sort": "created_date", "order": "desc"}
        )

    async def get_invoice_stats(self) -> Dict[str, Any]:
        try:
            response = await self.orders.stats()
        except AuthenticationRequired:
            raise
        except ApiError as e:
            logger.warning(f"Error getting invoice stats: {e.message}")
            return {"success": False, "error": e.message}

        result = {"success": True, "data": response}
        if isinstance(response, dict):
            result.update(response)
        return result

    # Customer portal

    def _customer_path(self, customer_code: str, suffix: str) -> str:
        return f"/customer/{quote(str(customer_code), safe='')}/{suffix}"

    async def get_customer_data(self, customer_code: str) -> Any:
        return await self.request(self._customer_path(customer_code, "data"))

    async def get_customer_order_stats(self, customer_code: str) -> Any:
        return await self.request(self._customer_path(customer_code, "order-stats"))

    async def get_customer_orders(self, customer_code: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(self._customer_path(customer_code, "orders"), params=params)

    async def get_customer_order(self, customer_code: str, order_id: Any) -> Any:
        return await self.request(self._customer_path(customer_code, f"orders/{order_id}"))

    async def get_customer_meetings(self, customer_code: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(self._customer_path(customer_code, "meetings"), params=params)

    async def get_customer_meeting(self, customer_code: str, meeting_id: Any) -> Any:
        return await self.request(self._customer_path(customer_code, f"meetings/{meeting_id}"))

    async def get_customer_market_reports(self, customer_code: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(self._customer_path(customer_code, "market-reports"), params=params)

    async def get_customer_market_report(self, customer_code: str, report_id: Any) -> Any:
        return await self.request(self._customer_path(customer_code, f"market-reports/{report_id}"))

    async def get_customer_payments(self, customer_code: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(self._customer_path(customer_code, "payments"), params=params)

    async def get_customer_payment(self, customer_code: str, payment_id: Any) -> Any:
        return await self.request(self._customer_path(customer_code, f"payments/{payment_id}"))

    async def get_customer_invoice_to_delivery(
        self,
        customer_code: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return await self.request(self._customer_path(customer_code, "invoice-to-delivery"), params=params)

    # Admin dashboard

    async def get_dashboard_stats(self) -> Any:
        return await self.request("/admin/dashboard/stats")

    async def get_recent_activities(self) -> Any:
        return await self.request("/admin/dashboard/activities")

    async def get_system_health(self) -> Any:
        return await self.request("/admin/system/health")

    # Settings

    async def get_expert_settings(self) -> Any:
        return await self.request("/settings/expert")

    async def update_expert_email(self, email_data: Dict[str, Any]) -> Any:
        return await self.request("/settings/expert/email", method="PUT", json=email_data)


_INVALID = object()


def _parse_body(response: httpx.Response) -> Any:
    """Parse a JSON body; empty bodies are {} and garbage is flagged"""
    if not response.content:
        return {}
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        if response.is_success:
            return _INVALID
        return {"raw": response.text}


def _form_value(value: Any) -> Any:
    """Multipart fields are strings; structured values travel as JSON"""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)
