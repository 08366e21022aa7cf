"""Tests for hyperhtml FastAPI integration."""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from hyperhtml import Element, html_root, hyper_render, include_file, text
from hyperhtml.elements import body, h1, li, p, ul
from hyperhtml.fastapi import HTMLRoute, HyperHTMLResponse, render_response


class TestRenderResponse:
    @pytest.mark.asyncio
    async def test_render_response(self):
        response = await render_response(p(text("hi")))
        assert response.status_code == 200
        assert response.body == b"<p>hi</p>"
        assert response.headers["content-type"].startswith("text/html")

    @pytest.mark.asyncio
    async def test_status_and_headers(self):
        response = await render_response(p(), status_code=404, headers={"x-page": "missing"})
        assert response.status_code == 404
        assert response.headers["x-page"] == "missing"

    def test_hyper_html_response(self):
        response = HyperHTMLResponse(ul(li(text("a"))), status_code=201)
        assert response.status_code == 201
        assert response.body == b"<ul>\n    <li>a</li>\n</ul>"

    def test_hyper_html_response_plain_callable(self):
        response = HyperHTMLResponse(lambda: "<b>ok</b>")
        assert response.body == b"<b>ok</b>"

    def test_hyper_html_response_plain_string(self):
        assert HyperHTMLResponse("<b>ok</b>").body == b"<b>ok</b>"


class TestHTMLRoute:
    @pytest.fixture
    def client(self, tmp_path):
        app = FastAPI()
        router = APIRouter(route_class=HTMLRoute)

        @router.get("/")
        async def home():
            return html_root(None, body(h1(text("Home"))))

        @router.get("/items/{count}")
        def items(count: int):
            return ul(hyper_render(*(li(text(str(n))) for n in range(count))))

        @router.get("/hello/{name}")
        async def hello(name: str) -> Element:
            return p(text(f"Hello {name}"))

        @router.get("/typed")
        async def typed() -> "PageOnlyForTypeCheckers":  # noqa: F821
            return p(text("typed"))

        @router.get("/data")
        async def data():
            return {"ok": True}

        @router.get("/broken")
        async def broken():
            return include_file(tmp_path / "missing.html")

        app.include_router(router)
        return TestClient(app, raise_server_exceptions=False)

    def test_renders_document(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert response.text == (
            '<!DOCTYPE html>\n<html lang="en" dir="ltr">\n'
            "    <body>\n        <h1>Home</h1>\n    </body>\n</html>"
        )

    def test_sync_endpoint_with_params(self, client):
        response = client.get("/items/3")
        assert response.text == "<ul>\n    <li>0</li>\n    <li>1</li>\n    <li>2</li>\n</ul>"

    def test_return_annotation_not_a_response_model(self, client):
        assert client.get("/hello/<bob>").text == "<p>Hello &lt;bob&gt;</p>"

    def test_unresolvable_annotation(self, client):
        assert client.get("/typed").text == "<p>typed</p>"

    def test_non_renderable_passes_through(self, client):
        response = client.get("/data")
        assert response.json() == {"ok": True}

    def test_render_error_surfaces(self, client):
        assert client.get("/broken").status_code == 500
