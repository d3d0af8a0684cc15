# Tests/test_database.py
import json

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from config import Settings
from database import CustomerStore, init_db, load_seed
from main import create_app
from paths import SEED_FILE, resolve

from conftest import make_customer


def write_seed(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def test_bundled_seed_file_loads():
    customers = load_seed(SEED_FILE)
    assert len(customers) == 5
    assert len({c.id for c in customers}) == len(customers)


def test_init_db_fills_empty_store(tmp_path):
    seed = write_seed(tmp_path / "seed.json", [make_customer(7, "Seven").model_dump()])
    store = CustomerStore()
    init_db(store, seed)
    assert [c.id for c in store] == [7]


def test_init_db_replaces_contents(tmp_path, store):
    seed = write_seed(tmp_path / "seed.json", [make_customer(1, "Only").model_dump()])
    init_db(store, seed)
    assert [c.name for c in store] == ["Only"]


def test_seed_must_be_a_list(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed(seed)


def test_seed_records_must_be_complete(tmp_path):
    seed = write_seed(tmp_path / "seed.json", [{"id": 1, "name": "Half"}])
    with pytest.raises(ValidationError):
        load_seed(seed)


def test_store_mutations(store):
    store.append(make_customer(9, "Nine"))
    assert store.next_id() == 10
    store.replace(0, make_customer(1, "Acme 2"))
    assert store[0].name == "Acme 2"
    removed = store.remove(1)
    assert removed.id == 2
    assert [c.id for c in store] == [1, 3, 4, 5, 9]


def test_snapshot_is_a_copy(store):
    snapshot = store.snapshot()
    snapshot.clear()
    assert len(store) == 5


def test_next_id_skips_missing_ids():
    store = CustomerStore([make_customer(None, "Ghost"), make_customer(4, "Four")])
    assert store.next_id() == 5


def test_app_seeds_store_on_startup(tmp_path):
    seed = write_seed(tmp_path / "seed.json", [make_customer(i, f"C{i}").model_dump() for i in (1, 2)])
    app = create_app(settings=Settings(log_level="WARNING", seed_file=str(seed)))
    with TestClient(app) as c:
        assert [x["id"] for x in c.get("/customers").json()["customers"]] == [1, 2]
        c.post("/customers", json={"name": "New"})
    assert len(app.state.store) == 3


def test_apps_do_not_share_stores(settings):
    first = create_app(settings=settings, store=CustomerStore([make_customer(1, "A")]))
    second = create_app(settings=settings, store=CustomerStore([make_customer(1, "A")]))
    with TestClient(first) as c:
        c.post("/customers", json={"name": "B"})
    assert len(first.state.store) == 2
    assert len(second.state.store) == 1


def test_startup_fails_without_seed_file(tmp_path):
    app = create_app(settings=Settings(log_level="WARNING", seed_file=str(tmp_path / "missing.json")))
    with pytest.raises(FileNotFoundError):
        with TestClient(app):
            pass


# --- configuration ---

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("DEFAULT_STRATEGY", "Presence")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://localhost:5173")
    settings = Settings.from_env()
    assert settings.port == 9001
    assert settings.log_level == "INFO"
    assert settings.default_strategy == "presence"
    assert settings.cors_origins == ["http://localhost:3000", "http://localhost:5173"]


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "SEED_FILE", "DEFAULT_STRATEGY", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.port == 8000
    assert settings.default_strategy == "falsy"
    assert settings.cors_origins == ["*"]
    assert resolve(settings.seed_file) == SEED_FILE


def test_settings_reject_unknown_strategy():
    with pytest.raises(ValueError):
        Settings(default_strategy="merge")


def test_resolve_relative_paths():
    assert resolve("Data/customerExamples.json") == SEED_FILE
