"""
Shared pytest fixtures.

Each test gets a fresh app built by ``create_app`` with its own users file,
public directory and log file under ``tmp_path``, so no state leaks between
tests.
"""

import json
import pytest

from cohesia import create_app
from cohesia.store import SessionStore, UserStore

PAGES = {
    "index.html": "<h1>landing</h1>",
    "login.html": "<h1>login form</h1>",
    "emp_dashboard.html": "<h1>employee dashboard</h1>",
    "hr_dashboard.html": "<h1>hr dashboard</h1>",
    "css/site.css": "body { margin: 0; }",
}

ANN = {"employeeId": "E1", "password": "p", "role": "HR", "name": "Ann"}
BOB = {
    "name": "Bob",
    "employeeId": "E2",
    "phoneNumber": "555-0102",
    "password": "secret",
    "role": "employee",
    "createdAt": "2024-01-01T00:00:00.000Z",
}


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"users": [ANN, BOB]}), encoding="utf-8")
    return path


@pytest.fixture
def public_dir(tmp_path):
    root = tmp_path / "public"
    for name, body in PAGES.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")
    return root


@pytest.fixture
def app(tmp_path, users_file, public_dir):
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "USERS_FILE": str(users_file),
        "STATIC_DIR": str(public_dir),
        "LOG_PATH": str(tmp_path / "logs" / "app.log"),
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_store(users_file) -> UserStore:
    return UserStore(str(users_file))


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def login(client):
    def _login(employee_id="E1", password="p"):
        return client.post("/login", json={"employeeId": employee_id, "password": password})
    return _login
