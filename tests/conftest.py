"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookshelf.catalog import BookRecord, Catalog, default_catalog
from bookshelf.config import Settings


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def custom_catalog() -> Catalog:
    """A catalog different from the built-in one."""
    return Catalog.from_records(
        [
            BookRecord(title="羅生門", author="芥川龍之介"),
            BookRecord(title="銀河鉄道の夜", author=None),
            BookRecord(title="雪国", author="川端康成"),
        ]
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(_env_file=None, debug=False)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
