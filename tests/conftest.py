"""Shared test fixtures and hypothesis strategies for the hrsync test suite."""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse
from hypothesis import strategies as st

from hrsync.api import HrApi
from hrsync.config.settings import ClientSettings
from hrsync.transport.client import ApiClient
from hrsync.transport.notify import CollectingNotifier
from hrsync.transport.session import AuthSession, MemoryTokenStore

BASE_URL = "http://hr.test"
VALID_PASSWORD = "secret"
ISSUED_TOKEN = "tok-123"


# ---------------------------------------------------------------------------
# Keep tests away from the real token file and user environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Point the durable token store at a temp dir for every test."""
    monkeypatch.setenv("HRSYNC_TOKEN_STORE_PATH", str(tmp_path / "storage.json"))
    monkeypatch.delenv("HRSYNC_API_BASE_URL", raising=False)


# ---------------------------------------------------------------------------
# Fake HR backend
# ---------------------------------------------------------------------------

_EMPLOYEES = [
    {"id": "1", "name": "Ada Lovelace", "department": "engineering"},
    {"id": "2", "name": "Grace Hopper", "department": "engineering"},
    {"id": "3", "name": "Frances Allen", "department": "finance"},
]


def _create_backend_app() -> FastAPI:
    """Minimal HR backend speaking the JSON contract the client expects."""
    app = FastAPI()
    app.state.calls = []

    @app.middleware("http")
    async def record_calls(request: Request, call_next):
        app.state.calls.append((request.method, request.url.path, request.url.query))
        return await call_next(request)

    @app.post("/api/auth/login")
    async def login(payload: dict) -> JSONResponse:
        if payload.get("password") != VALID_PASSWORD:
            return JSONResponse(status_code=401, content={"message": "Invalid credentials"})
        return JSONResponse(
            content={"token": ISSUED_TOKEN, "user": {"username": payload.get("username")}}
        )

    @app.post("/api/auth/logout")
    async def logout() -> dict:
        return {"ok": True}

    @app.get("/api/echo/headers")
    async def echo_headers(request: Request) -> dict:
        return {
            "authorization": request.headers.get("authorization"),
            "content_type": request.headers.get("content-type"),
        }

    @app.get("/api/employees")
    async def list_employees(department: str | None = None, page: int = 1) -> dict:
        rows = [e for e in _EMPLOYEES if department is None or e["department"] == department]
        return {"employees": rows, "total": 42, "page": page}

    @app.get("/api/employees/{employee_id}")
    async def get_employee(employee_id: str) -> JSONResponse:
        for row in _EMPLOYEES:
            if row["id"] == employee_id:
                return JSONResponse(content=row)
        return JSONResponse(status_code=404, content={"message": "not found"})

    @app.post("/api/employees", status_code=201)
    async def create_employee(payload: dict) -> dict:
        return {"id": "4", **payload}

    @app.put("/api/employees/{employee_id}")
    async def update_employee(employee_id: str, payload: dict) -> dict:
        return {"id": employee_id, **payload}

    @app.delete("/api/employees/{employee_id}", status_code=204)
    async def delete_employee(employee_id: str) -> None:
        return None

    @app.post("/api/attendance/clock")
    async def clock(payload: dict) -> dict:
        return {"status": f"clocked-{payload['action']}", "location": payload.get("location")}

    @app.get("/api/search")
    async def search(q: str, modules: str | None = None) -> dict:
        return {"employees": [{"id": "1", "name": f"match for {q}"}], "modules": modules}

    @app.post("/api/reports/generate")
    async def generate_report(payload: dict) -> dict:
        return {"report_id": "r-1", "type": payload["type"], "filters": payload["filters"]}

    @app.post("/api/onboarding/upload")
    async def upload(
        request: Request,
        file: UploadFile = File(...),
        document_type: str = Form(...),
        process_id: str | None = Form(None),
    ) -> dict:
        content = await file.read()
        return {
            "filename": file.filename,
            "size": len(content),
            "document_type": document_type,
            "process_id": process_id,
            "content_type": request.headers.get("content-type"),
        }

    @app.get("/api/malformed")
    async def malformed() -> PlainTextResponse:
        return PlainTextResponse("this is not json", status_code=200)

    @app.get("/api/broken")
    async def broken() -> PlainTextResponse:
        return PlainTextResponse("upstream exploded", status_code=500)

    return app


@pytest.fixture
def backend_app() -> FastAPI:
    return _create_backend_app()


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path) -> ClientSettings:
    """Test settings with safe defaults."""
    return ClientSettings(
        api_base_url=BASE_URL,
        token_store_path=str(tmp_path / "storage.json"),
        log_json=False,
    )


@pytest.fixture
def session() -> AuthSession:
    return AuthSession(MemoryTokenStore())


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def client(backend_app: FastAPI, session: AuthSession, notifier: CollectingNotifier) -> ApiClient:
    return ApiClient(
        BASE_URL,
        session=session,
        notifier=notifier,
        transport=httpx.ASGITransport(app=backend_app),
    )


@pytest.fixture
def api(client: ApiClient) -> HrApi:
    return HrApi(client)


@pytest.fixture
def mock_client():
    """Factory for an ApiClient whose requests are answered by ``handler(request)``."""

    def _make(handler, **kwargs) -> ApiClient:
        kwargs.setdefault("notifier", CollectingNotifier())
        return ApiClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)

    return _make


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

# Scalar dependency values compared by value
scalar_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=True),
    st.text(max_size=20),
)

dependency_lists = st.lists(scalar_values, min_size=0, max_size=6)

tokens = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.",
    min_size=1,
    max_size=64,
)

error_messages = st.text(min_size=1, max_size=80).filter(lambda s: s.strip() != "")

http_error_statuses = st.sampled_from([400, 401, 403, 404, 409, 422, 429, 500, 502, 503])
