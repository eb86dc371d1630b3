"""Shared pytest fixtures and configuration."""

import pytest

from student_admin.config import Settings

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory database with fast password hashing."""
    return Settings(
        db_path=":memory:",
        jwt_secret="test-secret",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
    )
