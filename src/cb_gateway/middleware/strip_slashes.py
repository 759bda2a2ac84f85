"""Trailing-slash normalization middleware.

Rewrites the ASGI path before routing so ``/account/coins/`` and
``/account/coins`` hit the same route instead of producing a redirect.
The root path ``/`` is left alone.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def strip_trailing_slashes(path: str) -> str:
    stripped = path.rstrip("/")
    return stripped or "/"


class StripSlashesMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.scope["path"]
        normalized = strip_trailing_slashes(path)
        if normalized != path:
            # Downstream apps receive this same scope dict
            request.scope["path"] = normalized
            raw_path = request.scope.get("raw_path")
            if raw_path is not None:
                request.scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        return await call_next(request)
