"""Pytest configuration and fixtures for neo-realms tests."""

from pathlib import Path

import pytest
import pytest_asyncio

from neo_realms.features.realms import MemoryRealm, PropertiesRealm

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding test resource files."""
    return FIXTURES_DIR


@pytest.fixture
def properties_config():
    """Config pointing the properties realm at the test-auth fixture."""
    return {
        "properties_path": "classpath:test-auth.properties",
        "search_paths": [str(FIXTURES_DIR)],
    }


@pytest.fixture
def memory_config():
    """In-memory realm config mirroring the properties fixture plus extras."""
    return {
        "users": {
            "paulo": {"password": "secret", "roles": ["administrator"]},
            "editor": {"password": "secret", "roles": ["editor"]},
            "printer": {"password": "ink", "permissions": ["printing:*:color"]},
            "locked": {"password": "secret", "roles": ["administrator"], "enabled": False},
            "viewer": {"password": "look", "roles": ["viewer"]},
        },
        "roles": {
            "administrator": ["*"],
            "editor": ["newsletter:edit:*"],
        },
    }


@pytest_asyncio.fixture
async def properties_realm(properties_config):
    """Initialized properties realm backed by the test-auth fixture."""
    realm = PropertiesRealm()
    await realm.init(properties_config)
    yield realm
    await realm.close()


@pytest_asyncio.fixture
async def memory_realm(memory_config):
    """Initialized in-memory realm."""
    realm = MemoryRealm()
    await realm.init(memory_config)
    yield realm
    await realm.close()


@pytest.fixture
def users_file(tmp_path):
    """Writable properties file for reload tests."""
    path = tmp_path / "users.properties"
    path.write_text(
        "user.alice = wonderland,reader\n"
        "role.reader = books:read\n",
        encoding="utf-8",
    )
    return path
