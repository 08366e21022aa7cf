"""
FastAPI integration: serve Renderables as HTML responses.

Usage:
    from fastapi import APIRouter
    from hyperhtml.fastapi import HTMLRoute, render_response

    router = APIRouter(route_class=HTMLRoute)

    @router.get("/")
    async def home():
        return html_root(None, body(h1(text("Welcome"))))

Endpoints on an HTMLRoute may return any built-in Renderable; it is
rendered off the event loop and wrapped in an HTMLResponse. Anything
else (dicts, Response objects) passes through to FastAPI unchanged.
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from inspect import isawaitable
from typing import Any, Callable, Mapping

from fastapi.responses import HTMLResponse
from fastapi.routing import APIRoute

from .core import Node, Renderable, render, render_async

logger = logging.getLogger(__name__)


class HyperHTMLResponse(HTMLResponse):
    """
    HTMLResponse that accepts a Renderable as its content.

    The Renderable is rendered sequentially when the response is built:
        return HyperHTMLResponse(page, status_code=201)
    """

    def render(self, content: Any) -> bytes:
        if callable(content):
            content = render(content)
        return super().render(content)


async def render_response(
    thunk: Renderable,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> HTMLResponse:
    """Render in a worker thread and wrap the result in an HTMLResponse."""
    content = await render_async(thunk)
    return HTMLResponse(content, status_code=status_code, headers=headers)


class HTMLRoute(APIRoute):
    """
    Route that auto-converts returned Renderables to HTMLResponse.

    Usage:
        router = APIRouter(route_class=HTMLRoute)
    """

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs):
        @wraps(endpoint)
        async def html_endpoint(*args, **kw):
            result = endpoint(*args, **kw)
            if isawaitable(result):
                result = await result

            if isinstance(result, Node):
                logger.debug(f"rendering {result!r} for {path}")
                return await render_response(result)

            return result

        # Resolve string annotations against the endpoint's own module; drop the
        # return annotation so a Renderable return type is not used as response_model
        try:
            sig = inspect.signature(endpoint, eval_str=True)
        except NameError:
            # Names imported only under TYPE_CHECKING stay as strings
            sig = inspect.signature(endpoint)
        html_endpoint.__signature__ = sig.replace(return_annotation=inspect.Signature.empty)  # type: ignore

        super().__init__(path, html_endpoint, **kwargs)
