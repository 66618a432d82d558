# records_api/middleware.py
from typing import Dict

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathScopedCORSMiddleware:
    """Apply a different CORS policy to each URL prefix.

    ``policies`` maps a path prefix to the keyword arguments of Starlette's
    ``CORSMiddleware``. The first matching prefix wins; paths that match no
    prefix get no CORS headers at all.
    """

    def __init__(self, app: ASGIApp, policies: Dict[str, dict]):
        self.app = app
        self.scoped = [
            (prefix, CORSMiddleware(app, **options)) for prefix, options in policies.items()
        ]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            for prefix, handler in self.scoped:
                if scope["path"].startswith(prefix):
                    await handler(scope, receive, send)
                    return
        await self.app(scope, receive, send)
