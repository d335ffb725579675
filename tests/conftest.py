"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from strawberry.types import ExecutionResult

from registrar.database.connection import create_tables, dispose_database, init_database
from registrar.graphql.context import build_context
from registrar.graphql.schema import schema
from registrar.repository import Repository, SqlAlchemyRepository

Execute = Callable[..., Awaitable[ExecutionResult]]


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared engine at a fresh SQLite file with all tables created."""
    url = f"sqlite:///{tmp_path / 'registrar_test.db'}"
    init_database(url, force_reinit=True)
    await create_tables()
    yield url
    await dispose_database()


@pytest.fixture(scope="function")
def repository(database: str) -> SqlAlchemyRepository:
    """SQLAlchemy repository bound to the test database."""
    _ = database
    return SqlAlchemyRepository()


@pytest.fixture
def mock_repository() -> MagicMock:
    """Repository double; every data-access method is an AsyncMock."""
    return MagicMock(spec=Repository)


def _executor(repository: Repository) -> Execute:
    async def execute(query: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=build_context(repository),
        )

    return execute


@pytest.fixture
def execute(repository: SqlAlchemyRepository) -> Execute:
    """Run a GraphQL document against the test database."""
    return _executor(repository)


@pytest.fixture
def execute_mocked(mock_repository: MagicMock) -> Execute:
    """Run a GraphQL document against the mock repository."""
    return _executor(mock_repository)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
