import base64
import io
import json
import os
import tempfile

# la config se lee al importar badgeworks: el entorno de pruebas va primero
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MEDIA_DIR"] = tempfile.mkdtemp(prefix="badgeworks-media-")
os.environ["ADMIN_KEY"] = "test-admin-key"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["PUBLIC_BASE_URL"] = "http://testserver"
os.environ["STORAGE_BACKEND"] = "local"

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from badgeworks import deps
from badgeworks.core.storage import LocalStorage
from badgeworks.db import Base
from badgeworks.main import app

ADMIN_KEY = "test-admin-key"

VALID_BRIEF = {
    "short_title": "Code Warrior",
    "icon_concept": "a crossed pair of angle brackets",
    "colors": {"primary": "#1E3A8A", "accent": "#F59E0B", "bg": "#F8FAFC"},
    "image_prompt": "flat round medal with angle brackets and a laurel",
}


def png_bytes(size=(64, 64), color=(220, 38, 38, 255)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", size, color).save(buf, "PNG")
    return buf.getvalue()


def png_data_url(size=(64, 64)) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes(size)).decode()


class FakeTextProvider:
    name = "fake"
    model = "fake-text"

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = json.dumps(VALID_BRIEF) if reply is None else reply
        self.error = error
        self.calls = []

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error:
            raise self.error
        return self.reply


class FakeImageProvider:
    name = "fake"
    model = "fake-image"

    def __init__(self, url: str | None = None, error: Exception | None = None):
        self.url = url or png_data_url((96, 64))
        self.error = error
        self.prompts = []

    def generate_image(self, prompt: str, quality: str = "standard") -> str:
        self.prompts.append((prompt, quality))
        if self.error:
            raise self.error
        return self.url


# create in-memory test database
@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False)
    with TestingSession() as session:
        yield session
    engine.dispose()


@pytest.fixture
def text_provider():
    return FakeTextProvider()


@pytest.fixture
def image_provider():
    return FakeImageProvider()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(root=tmp_path, url_prefix="/media")


@pytest.fixture(name="client")
def client_fixture(session, text_provider, image_provider, storage):
    app.dependency_overrides[deps.get_db] = lambda: session
    app.dependency_overrides[deps.get_text_provider] = lambda: text_provider
    app.dependency_overrides[deps.get_image_provider] = lambda: image_provider
    app.dependency_overrides[deps.get_storage] = lambda: storage
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_KEY}"}


@pytest.fixture
def make_badge(client, admin_headers):
    """Genera una insignia vía API y devuelve el JSON del badge."""
    def _make(name="Code Warrior", style="round-medal-minimal"):
        resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
            "name": name, "style": style, "brief": VALID_BRIEF,
        })
        assert resp.status_code == 200, resp.text
        return resp.json()["badge"]
    return _make


@pytest.fixture
def publish(client, admin_headers):
    def _publish(badge_id, person="Ada", project="Compiler X", citation="For shipping a compiler"):
        resp = client.post("/api/admin/publish-award", headers=admin_headers, json={
            "badge_id": badge_id,
            "person": {"name": person, "handle": "@ada", "title": "Compiler Engineer"},
            "project": {"name": project, "short_desc": "A tiny optimizing compiler"},
            "citation": citation,
        })
        assert resp.status_code == 200, resp.text
        return resp.json()
    return _publish
