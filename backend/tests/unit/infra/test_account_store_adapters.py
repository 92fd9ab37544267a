"""Adapter-specific behaviour: storage layout and backend failure reporting."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta

import fakeredis
import pytest
from profilehub.infra import build_account_store, build_password_hasher
from profilehub.infra.file import JsonFileAccountStore
from profilehub.infra.redis import RedisAccountStore
from profilehub.infra.sql import SqlAccountStore, build_engine
from profilehub.infra.werkzeug import WerkzeugPasswordHasher
from profilehub.services._shared.entities import Profile
from profilehub.services._shared.errors import StorageUnavailableError
from profilehub.services._shared.ports import InMemoryAccountStore, Sha256PasswordHasher
from sqlalchemy import inspect

from tests.factories.account import AccountFactory

# --------------------------------------------------------------------------- #
# Redis
# --------------------------------------------------------------------------- #


@pytest.fixture
def fake_redis():
    """Provide a fresh FakeRedis instance for each test."""
    r = fakeredis.FakeRedis(server=fakeredis.FakeServer())
    r.flushall()
    return r


def test_redis_stores_one_json_document_per_account(fake_redis):
    store = RedisAccountStore(r=fake_redis)
    account = AccountFactory(email="doc@example.com")

    store.create_if_absent(account)

    raw = fake_redis.get("account:doc@example.com")
    assert raw is not None
    doc = json.loads(raw)
    assert doc["email"] == "doc@example.com"
    assert doc["passwordHash"] == account.password_digest
    assert doc["profile"] == {"workHistory": [], "education": [], "skills": [], "interests": []}


def test_redis_custom_prefix(fake_redis):
    store = RedisAccountStore(r=fake_redis, prefix="li")
    store.create_if_absent(AccountFactory(email="p@example.com"))

    assert fake_redis.exists("li:p@example.com") == 1


def test_redis_corrupt_document_is_reported_as_unavailable(fake_redis):
    fake_redis.set("account:bad@example.com", "{not json")
    store = RedisAccountStore(r=fake_redis)

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.find_by_email("bad@example.com")
    assert excinfo.value.backend == "redis"


def test_redis_non_object_document_is_reported_as_unavailable(fake_redis):
    fake_redis.set("account:a@x.com", "[]")
    store = RedisAccountStore(r=fake_redis)

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.find_by_email("a@x.com")
    assert excinfo.value.backend == "redis"
    with pytest.raises(StorageUnavailableError):
        store.replace_profile("a@x.com", Profile(skills=["x"]), datetime.now(UTC))
    assert fake_redis.get("account:a@x.com") == b"[]"


def test_redis_non_object_profile_is_reported_as_unavailable(fake_redis):
    doc = AccountFactory(email="p@x.com").to_document()
    doc["profile"] = "oops"
    fake_redis.set("account:p@x.com", json.dumps(doc))

    with pytest.raises(StorageUnavailableError):
        RedisAccountStore(r=fake_redis).find_by_email("p@x.com")


def test_redis_replace_profile_retries_after_concurrent_write(monkeypatch):
    server = fakeredis.FakeServer()
    r = fakeredis.FakeRedis(server=server)
    other = fakeredis.FakeRedis(server=server)
    store = RedisAccountStore(r=r)
    account = AccountFactory(email="w@example.com", headline="before")
    store.create_if_absent(account)
    key = "account:w@example.com"
    reads = []
    real_pipeline = r.pipeline

    def racing_pipeline(*args, **kwargs):
        pipe = real_pipeline(*args, **kwargs)
        real_get = pipe.get

        def get(name):
            raw = real_get(name)
            reads.append(name)
            if len(reads) == 1:
                # another client rewrites the watched key before EXEC
                doc = json.loads(raw)
                doc["headline"] = "changed"
                doc["profile"]["skills"] = ["theirs"]
                other.set(key, json.dumps(doc))
            return raw

        pipe.get = get
        return pipe

    monkeypatch.setattr(r, "pipeline", racing_pipeline)
    stamp = account.created_at + timedelta(minutes=1)

    store.replace_profile("w@example.com", Profile(skills=["mine"]), stamp)

    assert reads == [key, key]
    stored = store.find_by_email("w@example.com")
    assert stored is not None
    assert stored.profile.skills == ["mine"]
    assert stored.headline == "changed"
    assert stored.updated_at == stamp


def test_redis_connection_loss_is_reported_as_unavailable():
    server = fakeredis.FakeServer()
    server.connected = False
    store = RedisAccountStore(r=fakeredis.FakeRedis(server=server))

    with pytest.raises(StorageUnavailableError):
        store.find_by_email("x@example.com")
    with pytest.raises(StorageUnavailableError):
        store.create_if_absent(AccountFactory())
    with pytest.raises(StorageUnavailableError):
        store.replace_profile("x@example.com", Profile(), datetime.now(UTC))
    with pytest.raises(StorageUnavailableError):
        store.ping()


# --------------------------------------------------------------------------- #
# SQL
# --------------------------------------------------------------------------- #


def test_sql_ensure_schema_is_idempotent(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'a.db'}")
    store = SqlAccountStore(engine)

    store.ensure_schema()
    store.ensure_schema()

    assert "accounts" in inspect(engine).get_table_names()
    engine.dispose()


def test_sql_in_memory_engine_shares_one_database():
    store = SqlAccountStore(build_engine("sqlite:///:memory:"))
    store.ensure_schema()
    store.create_if_absent(AccountFactory(email="mem@example.com"))

    assert store.find_by_email("mem@example.com") is not None


def test_sql_missing_table_is_reported_as_unavailable(tmp_path):
    store = SqlAccountStore(build_engine(f"sqlite:///{tmp_path / 'empty.db'}"))

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.find_by_email("x@example.com")
    assert excinfo.value.backend == "sql"
    assert excinfo.value.__cause__ is not None


def test_sql_unreachable_database_fails_ping(tmp_path):
    url = f"sqlite:///{tmp_path / 'missing-dir' / 'db.sqlite'}"
    store = SqlAccountStore(build_engine(url))

    with pytest.raises(StorageUnavailableError):
        store.ping()


# --------------------------------------------------------------------------- #
# JSON file
# --------------------------------------------------------------------------- #


def test_file_layout_and_no_leftover_temp_file(tmp_path):
    path = tmp_path / "accounts.json"
    store = JsonFileAccountStore(path)

    store.create_if_absent(AccountFactory(email="f@example.com"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["accounts"]
    assert list(data["accounts"]) == ["f@example.com"]
    assert not (tmp_path / "accounts.json.tmp").exists()


def test_file_ensure_file_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "accounts.json"
    store = JsonFileAccountStore(path)

    store.ensure_file()

    assert json.loads(path.read_text(encoding="utf-8")) == {"accounts": {}}


def test_file_survives_reopen(tmp_path):
    path = tmp_path / "accounts.json"
    JsonFileAccountStore(path).create_if_absent(AccountFactory(email="keep@example.com"))

    reopened = JsonFileAccountStore(path)

    assert reopened.find_by_email("keep@example.com") is not None


def test_file_corrupt_contents_are_reported_as_unavailable(tmp_path):
    path = tmp_path / "accounts.json"
    path.write_text("[1, 2", encoding="utf-8")
    store = JsonFileAccountStore(path)

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.find_by_email("x@example.com")
    assert excinfo.value.backend == "file"


def test_file_wrong_shape_is_reported_as_unavailable(tmp_path):
    path = tmp_path / "accounts.json"
    path.write_text(json.dumps({"accounts": []}), encoding="utf-8")

    with pytest.raises(StorageUnavailableError):
        JsonFileAccountStore(path).ping()


def test_file_non_object_document_is_reported_as_unavailable(tmp_path):
    path = tmp_path / "accounts.json"
    path.write_text(json.dumps({"accounts": {"a@x.com": []}}), encoding="utf-8")
    store = JsonFileAccountStore(path)

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.find_by_email("a@x.com")
    assert excinfo.value.backend == "file"
    with pytest.raises(StorageUnavailableError):
        store.replace_profile("a@x.com", Profile(skills=["x"]), datetime.now(UTC))
    assert json.loads(path.read_text(encoding="utf-8")) == {"accounts": {"a@x.com": []}}


# --------------------------------------------------------------------------- #
# Selection from configuration
# --------------------------------------------------------------------------- #


def test_build_account_store_selects_adapter(tmp_path, fake_redis):
    config = {
        "DATABASE_URL": "sqlite:///:memory:",
        "ACCOUNTS_FILE": str(tmp_path / "a.json"),
        "REDIS_URL": "redis://unused:6379/0",
    }

    def build(name: str, **kwargs):
        return build_account_store({**config, "STORAGE_BACKEND": name}, **kwargs)

    assert isinstance(build("memory"), InMemoryAccountStore)
    assert isinstance(build(" SQL "), SqlAccountStore)
    assert isinstance(build("file"), JsonFileAccountStore)
    redis_store = build_account_store(
        {**config, "STORAGE_BACKEND": "redis"}, redis_client=fake_redis
    )
    assert isinstance(redis_store, RedisAccountStore)
    assert redis_store.r is fake_redis


def test_build_account_store_rejects_unknown_backend():
    with pytest.raises(ValueError, match="STORAGE_BACKEND"):
        build_account_store({"STORAGE_BACKEND": "mongo"})


def test_build_password_hasher():
    assert isinstance(build_password_hasher(None), Sha256PasswordHasher)
    assert isinstance(build_password_hasher("werkzeug"), WerkzeugPasswordHasher)
    with pytest.raises(ValueError):
        build_password_hasher("md5")
