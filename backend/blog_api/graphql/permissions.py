from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from blog_api.dependencies.auth import authorize


class IsAuthenticated(BasePermission):
    """Runs the route guard before the field resolves; denials raise with their own code."""

    message = "Authentication required"

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        authorize(info.context)
        return True
