"""
API tests for the console routers

Each request goes through FastAPI with the REST backend replaced by the
fake backend from conftest.

Author: Customer Connect Team
Date: 2025-11-07
"""
import time

from jose import jwt

from app.domain.permissions import ADMIN_MENU


class TestRoot:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "online"

    def test_health_probes_backend(self, client, backend):
        backend.add("GET", "/admin/system/health", {"database": "ok"})

        response = client.get("/health")

        assert response.json()["status"] == "healthy"
        assert response.json()["backend"] == {"database": "ok"}

    def test_health_degraded_when_backend_down(self, client, backend):
        backend.add("GET", "/admin/system/health", {}, status=500)

        assert client.get("/health").json()["status"] == "degraded"


class TestAuthRoutes:
    """Test login, logout and session endpoints"""

    def test_login_success(self, client, backend, token_store):
        # Arrange
        backend.add("POST", "/auth/login", {
            "success": True,
            "data": {"token": "jwt-token", "user": {"id": 1, "username": "admin", "role": "admin"}},
        })

        # Act
        response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "secret"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["redirect"] == "/admin/dashboard"
        assert data["user"]["username"] == "admin"
        assert len(data["menu"]) == len(ADMIN_MENU)
        assert token_store.token == "jwt-token"

    def test_login_missing_password_makes_no_backend_call(self, client, backend):
        """Test an empty required field returns 422 before any API call"""
        response = client.post("/api/v1/auth/login", json={"username": "admin", "password": ""})

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Password is required",
            "errors": {"password": "Password is required"},
        }
        assert backend.requests == []

    def test_login_rejected_by_backend(self, client, backend):
        backend.add("POST", "/auth/login", {"message": "Invalid credentials"}, status=400)

        response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "wrong"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid credentials"
        assert response.json()["response"] == {"message": "Invalid credentials"}

    def test_login_without_token_in_response(self, client, backend):
        backend.add("POST", "/auth/login", {"success": False})

        response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "secret"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Invalid response format"

    def test_login_with_null_role_defaults_to_customer(self, client, backend):
        """Test a user without a role keeps a usable session"""
        # Arrange
        backend.add("POST", "/auth/login", {"data": {
            "token": "jwt-token",
            "user": {"id": 7, "username": 4021, "role": None, "customer_code": 12345601},
        }})

        # Act
        login = client.post("/api/v1/auth/login", json={"username": "4021", "password": "secret"})
        me = client.get("/api/v1/auth/me")

        # Assert
        assert login.status_code == 200
        assert login.json()["redirect"] == "/dashboard"
        assert login.json()["menu"] == []
        assert me.status_code == 200
        assert me.json()["data"]["role"] == "customer"
        assert me.json()["data"]["username"] == "4021"
        assert me.json()["data"]["customer_code"] == "12345601"

    def test_login_reads_user_type(self, client, backend):
        backend.add("POST", "/auth/login", {"token": "jwt-token", "user": {"username": "ops", "type": "admin"}})

        response = client.post("/api/v1/auth/login", json={"username": "ops", "password": "secret"})

        assert response.json()["redirect"] == "/admin/dashboard"

    def test_logout_clears_session(self, client, backend, admin_session):
        backend.add("POST", "/auth/logout", {"success": True})

        response = client.post("/api/v1/auth/logout")

        assert response.status_code == 200
        assert admin_session.token is None

    def test_me_without_session(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Authentication required. Please login again.",
            "redirect": "/",
        }

    def test_browser_navigation_is_redirected_to_login(self, client):
        response = client.get(
            "/api/v1/auth/me",
            headers={"Accept": "text/html"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/"

    def test_expired_token_is_cleared(self, client, token_store):
        expired = jwt.encode({"exp": int(time.time()) - 10}, "secret", algorithm="HS256")
        token_store.set(expired, {"username": "admin", "role": "admin"})

        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert token_store.token is None

    def test_customer_menu(self, client, customer_session):
        response = client.get("/api/v1/auth/menu")

        ids = [item["id"] for item in response.json()["data"]]
        assert ids == ["dashboard", "products", "order-to-cash", "market-report"]


class TestSessionErrors:
    """Test how backend and permission failures surface"""

    def test_backend_401_clears_token_and_redirects(self, client, backend, admin_session):
        # Arrange
        backend.add("GET", "/users", {"message": "jwt expired"}, status=401)

        # Act
        response = client.get("/api/v1/users/")

        # Assert
        assert response.status_code == 401
        assert response.json()["redirect"] == "/"
        assert admin_session.token is None

    def test_upstream_status_is_kept(self, client, backend, admin_session):
        backend.add("DELETE", "/users/3", {"message": "User not found"}, status=404)

        response = client.delete("/api/v1/users/3")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_customer_cannot_open_admin_screens(self, client, backend, customer_session):
        response = client.get("/api/v1/users/")

        assert response.status_code == 403
        assert backend.requests == []

    def test_customer_needs_module_view_permission(self, client, backend, customer_session):
        response = client.get("/api/v1/customer/meetings")

        assert response.status_code == 403
        assert backend.requests == []


class TestProductRoutes:

    def test_list_products(self, client, backend, customer_session):
        backend.add("GET", "/products", {"success": True, "data": {
            "products": [{"id": 1, "product_number": "PRD-1", "common_name": "Rose", "status": "active"}],
            "pagination": {"totalPages": 2},
        }})

        response = client.get("/api/v1/products/?search=rose")

        data = response.json()
        assert response.status_code == 200
        assert data["items"][0]["display_name"] == "Rose"
        assert data["pagination"]["total_pages"] == 2
        assert dict(backend.requests[0].url.params)["search"] == "rose"

    def test_create_product_required_field(self, client, backend, admin_session):
        """Test the product form is rejected without contacting the backend"""
        response = client.post("/api/v1/products/", json={"common_name": "Rose"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"product_number": "Product Number is required"}
        assert backend.requests == []

    def test_create_product_with_image(self, client, backend, admin_session):
        # Arrange
        backend.add("POST", "/products", {"success": True, "data": {"id": 5}})

        # Act
        response = client.post(
            "/api/v1/products/",
            data={"product_number": "PRD-5", "harvest_region_new": "Kerala, Assam"},
            files={"product_image1": ("rose.png", b"\x89PNG", "image/png")},
        )

        # Assert
        assert response.status_code == 200
        request = backend.requests[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b"rose.png" in request.content
        assert b'["Kerala", "Assam"]' in request.content

    def test_create_product_rejects_bad_image(self, client, backend, admin_session):
        response = client.post(
            "/api/v1/products/",
            data={"product_number": "PRD-5"},
            files={"product_image1": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {
            "product_image1": "Please select a valid image file (JPEG, PNG) for product_image1",
        }
        assert backend.requests == []

    def test_customer_cannot_create_products(self, client, backend, customer_session):
        response = client.post("/api/v1/products/", json={"product_number": "PRD-5"})

        assert response.status_code == 403


class TestNewsRoutes:

    def test_blank_display_order_defaults_to_zero(self, client, backend, admin_session):
        # Arrange
        backend.add("POST", "/news", {"success": True, "data": {"id": 3}})

        # Act
        response = client.post(
            "/api/v1/news/",
            data={
                "title": "Harvest update",
                "content": "https://acme.com/harvest",
                "status": "active",
                "display_order": "",
                "published_date": "",
            },
            files={"image": ("cover.png", b"\x89PNG", "image/png")},
        )

        # Assert
        assert response.status_code == 200
        content = backend.requests[0].content
        assert b'name="display_order"\r\n\r\n0\r\n' in content
        assert b"cover.png" in content

    def test_plain_html_form_is_accepted(self, client, backend, admin_session):
        """Test a urlencoded form without file inputs is read like multipart"""
        backend.add("POST", "/news", {"success": True})

        response = client.post(
            "/api/v1/news/",
            data={"title": "Harvest update", "content": "https://acme.com/harvest", "status": "active"},
        )

        assert response.status_code == 200
        request = backend.requests[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b"Harvest update" in request.content


class TestOrderRoutes:

    def test_order_status_validated(self, client, backend, admin_session):
        response = client.patch("/api/v1/orders/4/status", json={"status": "lost"})

        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["status"]
        assert backend.requests == []

    def test_order_status_update(self, client, backend, admin_session):
        backend.add("PATCH", "/orders/4/status", {"success": True})

        response = client.patch("/api/v1/orders/4/status", json={"status": "shipped"})

        assert response.status_code == 200
        assert backend.json_body(backend.requests[0]) == {"status": "shipped"}


class TestCustomerPortal:

    def test_orders_scoped_to_customer_code(self, client, backend, customer_session):
        # Arrange
        backend.add("GET", "/customer/CUST12345601/orders", {"success": True, "data": {
            "orders": [{"id": 1, "amount": 5000, "status": "pending"}],
            "totalPages": 2,
        }})

        # Act
        response = client.get("/api/v1/customer/orders?page=2")

        # Assert
        data = response.json()
        assert response.status_code == 200
        assert data["items"][0]["amount_display"] == "₹5,000.00"
        assert data["items"][0]["status_label"] == "PEND"
        assert data["pagination"]["current_page"] == 2
        assert data["pagination"]["has_next"] is False

    def test_customer_dashboard(self, client, backend, customer_session):
        backend.add("GET", "/customer/CUST12345601/meetings", {"data": {"meetings": []}})
        backend.add("GET", "/customer/CUST12345601/market-reports", {"data": {"reports": [{"id": 2}]}})
        backend.add("GET", "/customer/CUST12345601/order-stats", {"total": 1})
        backend.add("GET", "/products/top/by-sales", {"message": "offline"}, status=500)

        response = client.get("/api/v1/dashboard")

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["research"] == [{"id": 2}]
        assert data["top_products"] == []

    def test_my_permissions_proxied(self, client, backend, customer_session):
        backend.add("GET", "/auth/my-role-permissions", {"data": {"orders": {"view": True}}})

        response = client.get("/api/v1/auth/permissions")

        assert response.status_code == 200
        assert response.json()["data"] == {"data": {"orders": {"view": True}}}
