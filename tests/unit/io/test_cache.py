"""Tests for the filesystem registry cache."""

import json
import os
from pathlib import Path

import pytest

from pushui.integrations.http import FakeHttpClient
from pushui.integrations.time import FakeTime
from pushui.io.cache import FilesystemRegistryCache, InMemoryRegistryCache
from pushui.registry.client import CACHE_TTL_SECONDS, RegistryClient
from tests.test_utils.registry_helpers import (
    TEST_REGISTRY_URL,
    index_url,
    make_component,
    make_registry,
    registry_json,
)

requires_non_root = pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)


def _write_cache(cache_path: Path, age_seconds: float, time: FakeTime) -> None:
    registry = make_registry(make_component("button"))
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    cache_path.write_text(json.dumps(registry.to_json_dict()), encoding="utf-8")
    mtime = time.time() - age_seconds
    os.utime(cache_path, (mtime, mtime))


def test_missing_cache_reads_as_none(tmp_path: Path) -> None:
    cache = FilesystemRegistryCache(FakeTime(), tmp_path / "registry.json")

    assert cache.read(max_age_seconds=CACHE_TTL_SECONDS) is None


def test_cache_exactly_at_ttl_is_fresh(tmp_path: Path) -> None:
    time = FakeTime()
    cache_path = tmp_path / "registry.json"
    _write_cache(cache_path, CACHE_TTL_SECONDS, time)
    cache = FilesystemRegistryCache(time, cache_path)

    registry = cache.read(max_age_seconds=CACHE_TTL_SECONDS)

    assert registry is not None
    assert "button" in registry.components


def test_cache_past_ttl_is_expired(tmp_path: Path) -> None:
    time = FakeTime()
    cache_path = tmp_path / "registry.json"
    _write_cache(cache_path, CACHE_TTL_SECONDS + 1, time)
    cache = FilesystemRegistryCache(time, cache_path)

    assert cache.read(max_age_seconds=CACHE_TTL_SECONDS) is None


def test_expired_cache_is_returned_when_age_is_ignored(tmp_path: Path) -> None:
    time = FakeTime()
    cache_path = tmp_path / "registry.json"
    _write_cache(cache_path, 7 * 24 * 3600, time)
    cache = FilesystemRegistryCache(time, cache_path)

    assert cache.read(max_age_seconds=None) is not None


def test_corrupt_cache_reads_as_none(tmp_path: Path) -> None:
    cache_path = tmp_path / "registry.json"
    cache_path.write_text("{not json", encoding="utf-8")
    cache = FilesystemRegistryCache(FakeTime(), cache_path)

    assert cache.read(max_age_seconds=None) is None


def test_cache_failing_schema_reads_as_none(tmp_path: Path) -> None:
    cache_path = tmp_path / "registry.json"
    cache_path.write_text(json.dumps({"components": {"x": {"name": "x"}}}), encoding="utf-8")
    cache = FilesystemRegistryCache(FakeTime(), cache_path)

    assert cache.read(max_age_seconds=None) is None


def test_write_creates_directories_and_pretty_prints(tmp_path: Path) -> None:
    cache_path = tmp_path / "nested" / "cache" / "registry.json"
    cache = FilesystemRegistryCache(FakeTime(), cache_path)

    cache.write(make_registry(make_component("button")))

    content = cache_path.read_text(encoding="utf-8")
    assert content.startswith("{\n  ")
    assert json.loads(content)["components"]["button"]["name"] == "button"


def test_write_failure_is_swallowed(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    cache = FilesystemRegistryCache(FakeTime(), blocker / "registry.json")

    cache.write(make_registry(make_component("button")))

    assert blocker.is_file()


def test_in_memory_cache_honors_age() -> None:
    registry = make_registry(make_component("button"))
    cache = InMemoryRegistryCache(registry, age_seconds=CACHE_TTL_SECONDS + 1)

    assert cache.read(max_age_seconds=CACHE_TTL_SECONDS) is None
    assert cache.read(max_age_seconds=None) == registry


def test_cache_with_invalid_utf8_reads_as_none(tmp_path: Path) -> None:
    cache_path = tmp_path / "registry.json"
    cache_path.write_bytes(b"\xff\xfe garbage")
    cache = FilesystemRegistryCache(FakeTime(), cache_path)

    assert cache.read(max_age_seconds=None) is None


def test_undecodable_cache_does_not_block_fetch(tmp_path: Path) -> None:
    cache_path = tmp_path / "registry.json"
    cache_path.write_bytes(b"\xff\xfe garbage")
    remote = make_registry(make_component("card"))
    http = FakeHttpClient(responses={index_url(): registry_json(remote)})
    client = RegistryClient(
        http=http,
        cache=FilesystemRegistryCache(FakeTime(), cache_path),
        default_url=TEST_REGISTRY_URL,
    )

    assert client.fetch_registry() == remote
    assert json.loads(cache_path.read_text(encoding="utf-8"))["components"]["card"]


@requires_non_root
def test_unreadable_cache_directory_reads_as_none(tmp_path: Path) -> None:
    time = FakeTime()
    cache_dir = tmp_path / "cache"
    cache_path = cache_dir / "registry.json"
    _write_cache(cache_path, 0, time)
    cache_dir.chmod(0o000)
    try:
        cache = FilesystemRegistryCache(time, cache_path)

        assert cache.read(max_age_seconds=None) is None
    finally:
        cache_dir.chmod(0o755)
