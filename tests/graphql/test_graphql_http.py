"""
Integration tests for the GraphQL endpoint served over HTTP
"""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from bookshelf.api.app import create_app

BOOKS_QUERY = "query { test { title author } }"

EXPECTED_BOOKS = [
    {"title": "吾輩は猫である", "author": "夏目漱石"},
    {"title": "走れメロス", "author": "太宰治"},
]


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(config=test_settings)) as client:
        yield client


@pytest.mark.integration
def test_post_books_query(client):
    resp = client.post("/graphql", json={"query": BOOKS_QUERY})

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert "errors" not in body
    assert body["data"]["test"] == EXPECTED_BOOKS


@pytest.mark.integration
def test_get_books_query(client):
    resp = client.get("/graphql", params={"query": "{ test { title } }"})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["test"] == [
        {"title": "吾輩は猫である"},
        {"title": "走れメロス"},
    ]


@pytest.mark.integration
def test_named_operation(client):
    resp = client.post(
        "/graphql",
        json={"query": "query Books { test { author } }", "operationName": "Books"},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["test"] == [{"author": "夏目漱石"}, {"author": "太宰治"}]


@pytest.mark.integration
def test_unknown_field_returns_graphql_error(client):
    resp = client.post("/graphql", json={"query": "{ test { isbn } }"})

    assert resp.status_code < 500
    body = resp.json()
    assert body["errors"]
    assert "isbn" in body["errors"][0]["message"]
    assert body.get("data") is None


@pytest.mark.integration
def test_malformed_query_returns_graphql_error(client):
    resp = client.post("/graphql", json={"query": "{ test { title "})

    assert resp.status_code < 500
    assert resp.json()["errors"]


@pytest.mark.integration
def test_repeated_requests_are_identical(client):
    bodies = [client.post("/graphql", json={"query": BOOKS_QUERY}).json() for _ in range(3)]

    assert bodies[0] == bodies[1] == bodies[2]
    assert bodies[0]["data"]["test"] == EXPECTED_BOOKS


@pytest.mark.integration
def test_health_endpoint(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.integration
def test_graphiql_served_to_browsers(client):
    resp = client.get("/graphql", headers={"Accept": "text/html"})

    assert resp.status_code == 200
    assert "graphiql" in resp.text.lower()


@pytest.mark.integration
def test_custom_graphql_path(test_settings):
    config = test_settings.model_copy(update={"graphql_path": "/api/graphql"})

    with TestClient(create_app(config=config)) as client:
        resp = client.post("/api/graphql", json={"query": BOOKS_QUERY})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["test"] == EXPECTED_BOOKS


@pytest.mark.integration
@pytest.mark.asyncio
async def test_custom_catalog_is_served(custom_catalog, test_settings):
    app = create_app(catalog=custom_catalog, config=test_settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/graphql", json={"query": BOOKS_QUERY})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["test"] == [
        {"title": "羅生門", "author": "芥川龍之介"},
        {"title": "銀河鉄道の夜", "author": None},
        {"title": "雪国", "author": "川端康成"},
    ]
