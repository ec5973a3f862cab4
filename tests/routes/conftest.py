# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

import pytest
from httpx import AsyncClient

USER = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}
OTHER_USER = {"username": "hellas", "name": "Arto Hellas", "password": "sekret"}

BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
]


async def register_and_login(client: AsyncClient, user: dict[str, str]) -> dict[str, str]:
    """Register ``user`` and return bearer auth headers for it."""
    created = await client.post("/api/users", json=user)
    assert created.status_code == 201, created.text
    login = await client.post(
        "/api/login",
        json={"username": user["username"], "password": user["password"]},
    )
    assert login.status_code == 200, login.text
    return {"Authorization": f"Bearer {login.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers for a freshly registered user."""
    return await register_and_login(client, USER)


@pytest.fixture
async def other_auth_headers(client: AsyncClient, auth_headers: dict[str, str]) -> dict[str, str]:
    """Auth headers for a second user."""
    return await register_and_login(client, OTHER_USER)


@pytest.fixture
async def saved_blogs(client: AsyncClient, auth_headers: dict[str, str]) -> list[dict]:
    """Store the sample blogs through the API, in order."""
    saved = []
    for blog in BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=auth_headers)
        assert response.status_code == 201, response.text
        saved.append(response.json())
    return saved


@pytest.fixture
def sample_blogs() -> list[dict]:
    """Blog payloads in the order they are stored."""
    return [dict(blog) for blog in BLOGS]
