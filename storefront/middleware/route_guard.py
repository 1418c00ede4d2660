from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse
from typing import Sequence
from urllib.parse import urlencode
import logging

logger = logging.getLogger(__name__)


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """
    Redirect requests to the vendor back office when no session cookie is set.

    Only the presence of the cookie is checked here; the endpoints validate
    the token itself. Bearer-authenticated API clients pass straight through.
    """

    def __init__(
        self,
        app,
        protected_routes: Sequence[str],
        cookie_name: str,
        login_path: str,
    ):
        super().__init__(app)
        self.protected_routes = tuple(protected_routes)
        self.cookie_name = cookie_name
        self.login_path = login_path

    def is_protected(self, path: str) -> bool:
        return any(path.startswith(route) for route in self.protected_routes)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if self.is_protected(path):
            has_cookie = bool(request.cookies.get(self.cookie_name))
            has_bearer = request.headers.get("authorization", "").lower().startswith(
                "bearer "
            )
            if not has_cookie and not has_bearer:
                logger.info(f"No session for {path}, redirecting to {self.login_path}")
                target = f"{self.login_path}?{urlencode({'redirected': '1'})}"
                return RedirectResponse(url=target, status_code=303)

        return await call_next(request)
