"""CORS Policy — cross-origin headers and immediate preflight answers.

Invariants:
    - Every OPTIONS request is answered here: 200, body {}, allow-origin,
      allow-credentials and allow-methods headers; no route or dependency runs
    - Policy values come from BootstrapConfig only (no hardcoded origins)
    - Non-preflight responses get CORS headers from Starlette's CORSMiddleware

Design Decisions:
    - Pure ASGI middleware over BaseHTTPMiddleware: short-circuits before the
      router without wrapping the request body stream
    - Added after CORSMiddleware so it is the outermost layer
    - A wildcard origin list answers "*"; an explicit list echoes the request
      Origin when it is allowed and omits the header otherwise
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from starter_api.config import BootstrapConfig


def register_cors(app: FastAPI, config: BootstrapConfig) -> None:
    """Install the CORS policy on the app."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.allowed_origins),
        allow_credentials=config.cors_credentials,
        allow_methods=list(config.allowed_methods),
        allow_headers=["*"],
    )
    app.add_middleware(PreflightMiddleware, config=config)


def preflight_headers(config: BootstrapConfig, origin: str | None) -> dict[str, str]:
    """Headers sent with every preflight answer."""
    headers: dict[str, str] = {}
    if "*" in config.allowed_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in config.allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    if config.cors_credentials:
        headers["Access-Control-Allow-Credentials"] = "true"
    headers["Access-Control-Allow-Methods"] = ",".join(config.allowed_methods)
    return headers


class PreflightMiddleware:
    """Answer OPTIONS requests before they reach the router."""

    def __init__(self, app: ASGIApp, config: BootstrapConfig):
        self.app = app
        self.config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            await self.app(scope, receive, send)
            return
        origin = Headers(scope=scope).get("origin")
        response = JSONResponse(
            {}, status_code=200,
            headers=preflight_headers(self.config, origin),
        )
        await response(scope, receive, send)
