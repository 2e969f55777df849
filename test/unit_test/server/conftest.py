from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from actionwire.controller import Controller, action
from actionwire.core.config import Settings
from actionwire.server import ActionRoute, create_app


class RecordMissing(Exception):
    pass


def build_controller():
    """Define the test controller; call after configuring Controller."""

    class ArticlesController(Controller):
        @action("Index")
        def index(self, params):
            self.headers["Content-Type"] = "text/plain"
            self.body = f"page={params.get('page', '1')}"

        @action("Show")
        def show(self, params):
            if params["id"] == "0":
                raise RecordMissing(params["id"])
            self.body = f"article {params['id']}"

        @action("Create")
        def create(self, params):
            self.status = 201
            self.body = f"created {params['title']}"

        @action("Legacy")
        def legacy(self, params):
            self.redirect_to("/articles")

        @action("Crash")
        def crash(self, params):
            raise RuntimeError("kaboom")

    return ArticlesController


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(_env_file=None, log_file_dir=str(tmp_path), enable_file_logging=False)


@pytest.fixture
def articles_routes():
    Controller.configure(handled_exceptions={RecordMissing: 404})
    articles = build_controller()
    return [
        ActionRoute("/articles", articles.Index),
        ActionRoute("/articles", articles.Create, ("POST",)),
        ActionRoute("/articles/legacy", articles.Legacy),
        ActionRoute("/articles/crash", articles.Crash),
        ActionRoute("/articles/{id}", articles.Show),
    ]


@pytest_asyncio.fixture
async def client(articles_routes, test_settings) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(articles_routes, settings=test_settings)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac
