"""Shared fixtures: in-memory fakes for the projects backend and the Commons API."""

import asyncio
import json
from urllib.parse import unquote

import httpx
import pytest

from commons_projects.core.repositories.commons_repo import CommonsRepo
from commons_projects.core.repositories.project_repo import ProjectRepo
from commons_projects.core.services.console import ProjectsConsole

BACKEND_URL = "http://backend.test"
COMMONS_API_URL = "https://commons.test/w/api.php"

VALID_URL = "https://commons.wikimedia.org/wiki/File:X.jpg"


class FakeBackend:
    """Serves ``GET``/``POST /api/project`` from an in-memory list."""

    def __init__(self, projects=None):
        self.projects = list(projects or [])
        self.list_calls = 0
        self.created = []
        self.list_status = 200
        self.create_status = 201
        self.list_error = None
        self.create_error = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0)
        assert request.url.path == "/api/project"
        if request.method == "GET":
            self.list_calls += 1
            if self.list_error is not None:
                raise self.list_error
            if self.list_status >= 400:
                return httpx.Response(self.list_status, text="backend down")
            return httpx.Response(self.list_status, json=self.projects)

        payload = json.loads(request.content)
        self.created.append(payload)
        if self.create_error is not None:
            raise self.create_error
        if self.create_status >= 400:
            return httpx.Response(self.create_status, json={"detail": "rejected"})
        self.projects.append({"id": len(self.projects) + 1, **payload})
        return httpx.Response(self.create_status, json=self.projects[-1])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeCommons:
    """Answers ``action=query`` for the titles in ``existing``."""

    def __init__(self, existing=("File:X.jpg",)):
        self.existing = set(existing)
        self.requests = []
        self.error = None
        self.body = None

    @property
    def titles(self):
        return [request.url.params["titles"] for request in self.requests]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(200, content=self.body)

        title = unquote(request.url.params["titles"])
        if title in self.existing:
            page = {"pageid": 42, "ns": 6, "title": title}
            key = "42"
        else:
            page = {"ns": 6, "title": title, "missing": ""}
            key = "-1"
        return httpx.Response(200, json={"batchcomplete": "", "query": {"pages": {key: page}}})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend():
    return FakeBackend(
        [
            {"id": 1, "title": "Gita recital", "language": "sa", "commons_url": VALID_URL},
            {"id": 2, "title": "Konkani songs", "language": "kok", "commons_url": VALID_URL},
        ]
    )


@pytest.fixture
def commons():
    return FakeCommons()


@pytest.fixture
def project_repo(backend):
    return ProjectRepo(BACKEND_URL, timeout=5, transport=backend.transport())


@pytest.fixture
def commons_repo(commons):
    return CommonsRepo(COMMONS_API_URL, timeout=5, transport=commons.transport())


@pytest.fixture
def console(project_repo, commons_repo):
    return ProjectsConsole(project_repo, commons_repo)
