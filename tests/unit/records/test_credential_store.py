"""Unit tests for CredentialStore."""

import pytest

from student_admin.records import (
    Administrator,
    AdministratorExistsError,
    CredentialStore,
    Database,
)


@pytest.fixture
def store():
    """Create a CredentialStore over an in-memory database."""
    db = Database(":memory:")
    db.create_tables()
    yield CredentialStore(db)
    db.close()


@pytest.mark.unit
class TestFindByEmail:
    """Tests for find_by_email."""

    def test_returns_saved_admin(self, store: CredentialStore) -> None:
        store.save(Administrator(email="a@x.com", password_hash="h", name="Alice"))

        admin = store.find_by_email("a@x.com")

        assert admin is not None
        assert admin.email == "a@x.com"
        assert admin.name == "Alice"
        assert admin.password_hash == "h"

    def test_missing_returns_none(self, store: CredentialStore) -> None:
        assert store.find_by_email("nobody@x.com") is None


@pytest.mark.unit
class TestSave:
    """Tests for save."""

    def test_insert_generates_id(self, store: CredentialStore) -> None:
        saved = store.save(Administrator(email="a@x.com", password_hash="h", name="Alice"))

        assert saved.id is not None

    def test_save_with_same_id_replaces(self, store: CredentialStore) -> None:
        saved = store.save(Administrator(email="a@x.com", password_hash="h", name="Alice"))

        store.save(Administrator(id=saved.id, email="a@x.com", password_hash="h2", name="Al"))

        admin = store.find_by_email("a@x.com")
        assert admin is not None
        assert admin.id == saved.id
        assert admin.name == "Al"
        assert admin.password_hash == "h2"

    def test_duplicate_email_raises(self, store: CredentialStore) -> None:
        store.save(Administrator(email="a@x.com", password_hash="h", name="Alice"))

        with pytest.raises(AdministratorExistsError) as exc_info:
            store.save(Administrator(email="a@x.com", password_hash="h", name="Other"))

        assert "a@x.com" in str(exc_info.value)


@pytest.mark.unit
class TestDelete:
    """Tests for delete."""

    def test_delete_existing(self, store: CredentialStore) -> None:
        saved = store.save(Administrator(email="a@x.com", password_hash="h", name="Alice"))

        assert store.delete(saved.id) is True
        assert store.find_by_email("a@x.com") is None

    def test_delete_missing_returns_false(self, store: CredentialStore) -> None:
        assert store.delete("nonexistent-id") is False
