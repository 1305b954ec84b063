from enum import Enum
from typing import Dict, FrozenSet, Optional


class Role(str, Enum):
    ADMIN = "admin"
    CASHIER = "cashier"


LOGIN_ROUTE = "/login"
HOME_ROUTE = "/dashboard"

ROUTE_PERMISSIONS: Dict[str, FrozenSet[Role]] = {
    "/dashboard": frozenset({Role.ADMIN, Role.CASHIER}),
    "/pos": frozenset({Role.ADMIN, Role.CASHIER}),
    "/inventory": frozenset({Role.ADMIN}),
    "/reports": frozenset({Role.ADMIN}),
    "/settings": frozenset({Role.ADMIN}),
}


def _section(route: str) -> str:
    # "/inventory/42" -> "/inventory"
    parts = route.strip("/").split("/")
    return "/" + parts[0] if parts[0] else "/"


def is_allowed(role: Optional[str], route: str) -> bool:
    if role is None:
        return False
    try:
        role = Role(role)
    except ValueError:
        return False
    return role in ROUTE_PERMISSIONS.get(_section(route), frozenset())


def resolve(role: Optional[str], route: str) -> str:
    """Return where a user with ``role`` ends up when asking for ``route``."""
    if role is None:
        return LOGIN_ROUTE
    if is_allowed(role, route):
        return route
    return HOME_ROUTE
