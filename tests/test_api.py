from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_storage
from portfolio.parsing import LocalWorkStorage, StoragePaths

EXAMPLE_DESCRIPTION = Path(__file__).resolve().parent.parent / "examples" / "description.md"


@pytest.fixture
def storage(tmp_path):
    return LocalWorkStorage(StoragePaths(tmp_path / "data"))


@pytest.fixture
def client(storage):
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage
    return TestClient(app)


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_parse_posted_description(client):
    response = client.post("/descriptions/parse", json={"markdown": "# Hi\n\nHello there.\n"})
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == {"default": "Hi"}
    assert body["paragraphs"]["default"] == [{"content": "Hello there.", "id": ""}]
    assert body["languages"] == {"kind": "unlocalized", "codes": ["default"]}


def test_unknown_work_is_404(client):
    assert client.get("/works/missing/description").status_code == 404
    assert client.post("/works/missing/description/parse").status_code == 404


def test_stored_work_is_parsed_and_persisted(client, storage):
    storage.write_description("ideaseed", EXAMPLE_DESCRIPTION.read_text(encoding="utf-8"))
    assert client.get("/works").json() == {"works": ["ideaseed"]}

    response = client.get("/works/ideaseed/description")
    assert response.status_code == 200
    assert response.json()["title"]["fr-FR"] == "ideaseed"

    response = client.post("/works/ideaseed/description/parse")
    assert response.status_code == 200
    assert Path(response.json()["output_path"]).exists()
    assert storage.paths.parsed_output_path("ideaseed").exists()


def test_undecodable_description_is_422(client, storage):
    storage.ensure_work_dir("broken")
    storage.paths.description_path("broken").write_bytes(b"\xff\xfe\xfa")
    assert client.get("/works/broken/description").status_code == 422


def test_no_cross_origin_headers(client):
    response = client.get("/healthz", headers={"Origin": "https://elsewhere.example"})
    assert "access-control-allow-origin" not in response.headers
