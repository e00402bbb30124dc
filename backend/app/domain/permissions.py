"""
Role permissions and sidebar menus

A role's permissions are a matrix: module -> {action: granted}. Customer
users only see sidebar entries whose module grants "view".
"""
from typing import Any, Dict, List, Optional

DEFAULT_MODULES = [
    "dashboard",
    "users",
    "roles",
    "products",
    "orders",
    "meetings",
    "market_reports",
    "payments",
]

DEFAULT_ACTIONS = ["view"]

CUSTOMER_MENU = [
    {"id": "dashboard", "label": "Dashboard", "path": "/dashboard", "permission": "dashboard"},
    {"id": "products", "label": "Products", "path": "/products", "permission": "products"},
    {"id": "order-to-cash", "label": "Order to Cash", "path": "/order-to-cash", "permission": "orders"},
    {"id": "meeting-minutes", "label": "Meeting Minutes", "path": "/meeting-minutes", "permission": "meetings"},
    {"id": "market-report", "label": "Market Report", "path": "/market-report", "permission": "market_reports"},
]

ADMIN_MENU = [
    {"id": "dashboard", "label": "Dashboard", "path": "/admin/dashboard"},
    {"id": "users", "label": "User Management", "path": "/admin/users"},
    {"id": "roles", "label": "Role Management", "path": "/admin/roles"},
    {"id": "products", "label": "Products", "path": "/admin/products"},
    {"id": "orders", "label": "Order to Cash", "path": "/admin/orders"},
    {"id": "invoice-to-delivery", "label": "Invoice to Delivery", "path": "/admin/invoice-to-delivery"},
    {"id": "meeting-minutes", "label": "Meeting Minutes", "path": "/admin/meeting-minutes"},
    {"id": "market-report", "label": "Market Report", "path": "/market-report"},
    {"id": "settings", "label": "Settings", "path": "/admin/settings"},
]


def empty_permissions(modules: List[str] = None, actions: List[str] = None) -> Dict[str, Dict[str, bool]]:
    """Permission matrix with every action revoked"""
    return {
        module: {action: False for action in (actions or DEFAULT_ACTIONS)}
        for module in (modules or DEFAULT_MODULES)
    }


def _actions(module_perms: Any) -> Dict[str, bool]:
    # bare booleans stand for the view action
    if isinstance(module_perms, dict):
        return module_perms
    return {"view": module_perms is True}


def permission_count(permissions: Dict[str, Dict[str, bool]]) -> int:
    return sum(
        1
        for module_perms in (permissions or {}).values()
        for granted in _actions(module_perms).values()
        if granted
    )


def total_permission_count(permissions: Dict[str, Dict[str, bool]]) -> int:
    return sum(len(_actions(module_perms)) for module_perms in (permissions or {}).values())


def permission_coverage(permissions: Dict[str, Dict[str, bool]]) -> int:
    """Granted actions as a rounded percentage of all actions"""
    total = total_permission_count(permissions)
    if total == 0:
        return 0
    return round(permission_count(permissions) / total * 100)


def has_view_permission(permissions: Optional[Dict[str, Any]], module: str) -> bool:
    """
    Modules grant view either as {"view": true, ...} or as a bare true.
    Anything else (missing, false, malformed) hides the module.
    """
    if not permissions:
        return False

    module_permissions = permissions.get(module)
    if isinstance(module_permissions, dict):
        return module_permissions.get("view") is True
    return module_permissions is True


def user_permissions(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Permissions of a logged-in user, wherever the backend put them"""
    if not user:
        return None
    user_role = user.get("userRole")
    if isinstance(user_role, dict) and user_role.get("permissions"):
        return user_role["permissions"]
    return user.get("permissions")


def filter_menu(items: List[Dict[str, Any]], permissions: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [item for item in items if has_view_permission(permissions, item["permission"])]


def user_type(user: Optional[Dict[str, Any]]) -> str:
    """"admin" or "customer"; backends send it as type or role, possibly null"""
    if not user:
        return "customer"
    return user.get("type") or user.get("role") or "customer"


def menu_for_user(user: Dict[str, Any]) -> List[Dict[str, Any]]:
    if user_type(user) == "admin":
        return list(ADMIN_MENU)
    return filter_menu(CUSTOMER_MENU, user_permissions(user))
