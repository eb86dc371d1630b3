"""Unit tests for AuthService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from student_admin.auth import (
    AuthService,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHasher,
    TokenService,
)
from student_admin.records import (
    Administrator,
    AdministratorExistsError,
    CredentialStore,
    Database,
    RecordStoreError,
)

TTL = timedelta(hours=1)


class FakeClock:
    """Controllable clock for expiry tests."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def credentials():
    """CredentialStore over an in-memory database."""
    db = Database(":memory:")
    db.create_tables()
    yield CredentialStore(db)
    db.close()


@pytest.fixture
def tokens(clock: FakeClock) -> TokenService:
    return TokenService(secret="test-secret", ttl=TTL, clock=clock)


@pytest.fixture
def auth(credentials: CredentialStore, tokens: TokenService) -> AuthService:
    return AuthService(credentials=credentials, hasher=PasswordHasher(rounds=4), tokens=tokens)


@pytest.mark.unit
class TestRegister:
    """Tests for register."""

    def test_register_stores_hashed_password(
        self, auth: AuthService, credentials: CredentialStore
    ) -> None:
        auth.register("a@x.com", "pw1", "Alice")

        admin = credentials.find_by_email("a@x.com")
        assert admin is not None
        assert admin.name == "Alice"
        assert admin.password_hash != "pw1"

    def test_register_duplicate_email_raises(self, auth: AuthService) -> None:
        auth.register("a@x.com", "pw1", "Alice")

        with pytest.raises(DuplicateEmailError):
            auth.register("a@x.com", "different", "Someone Else")

    def test_register_race_reported_as_duplicate(self) -> None:
        """A unique-constraint failure at save time is still DuplicateEmail."""
        credentials = MagicMock()
        credentials.find_by_email.return_value = None
        credentials.save.side_effect = AdministratorExistsError("exists")
        auth = AuthService(
            credentials=credentials, hasher=PasswordHasher(rounds=4), tokens=MagicMock()
        )

        with pytest.raises(DuplicateEmailError):
            auth.register("a@x.com", "pw1", "Alice")

    def test_register_does_not_issue_token(self) -> None:
        credentials = MagicMock()
        credentials.find_by_email.return_value = None
        tokens = MagicMock()
        auth = AuthService(credentials=credentials, hasher=PasswordHasher(rounds=4), tokens=tokens)

        auth.register("a@x.com", "pw1", "Alice")

        tokens.issue.assert_not_called()


@pytest.mark.unit
class TestLogin:
    """Tests for login."""

    def test_login_returns_token_email_name(self, auth: AuthService, tokens: TokenService) -> None:
        auth.register("a@x.com", "pw1", "Alice")

        result = auth.login("a@x.com", "pw1")

        assert result.email == "a@x.com"
        assert result.name == "Alice"
        assert tokens.extract_email(result.token) == "a@x.com"

    def test_wrong_password_and_unknown_email_look_the_same(self, auth: AuthService) -> None:
        auth.register("a@x.com", "pw1", "Alice")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            auth.login("a@x.com", "wrong")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            auth.login("nobody@x.com", "pw1")

        assert str(wrong_password.value) == str(unknown_email.value)


@pytest.mark.unit
class TestVerifyToken:
    """Tests for verify_token."""

    def test_valid_token_accepted(self, auth: AuthService) -> None:
        auth.register("a@x.com", "pw1", "Alice")
        token = auth.login("a@x.com", "pw1").token

        result = auth.verify_token(f"Bearer {token}")

        assert result.token == token
        assert result.email == "a@x.com"
        assert result.name == "Alice"

    def test_verify_is_repeatable(self, auth: AuthService) -> None:
        auth.register("a@x.com", "pw1", "Alice")
        token = auth.login("a@x.com", "pw1").token

        assert auth.verify_token(f"Bearer {token}") == auth.verify_token(f"Bearer {token}")

    @pytest.mark.parametrize("header", [None, "", "Token abc", "bearer abc", "Bearer"])
    def test_missing_or_wrong_scheme_rejected(self, auth: AuthService, header) -> None:
        with pytest.raises(InvalidTokenError):
            auth.verify_token(header)

    def test_malformed_token_rejected(self, auth: AuthService) -> None:
        with pytest.raises(InvalidTokenError):
            auth.verify_token("Bearer not.a.jwt")

    def test_expired_token_rejected(self, auth: AuthService, clock: FakeClock) -> None:
        auth.register("a@x.com", "pw1", "Alice")
        token = auth.login("a@x.com", "pw1").token

        clock.now += TTL

        with pytest.raises(InvalidTokenError):
            auth.verify_token(f"Bearer {token}")

    def test_deleted_admin_token_rejected(
        self, auth: AuthService, credentials: CredentialStore
    ) -> None:
        admin = auth.register("a@x.com", "pw1", "Alice")
        token = auth.login("a@x.com", "pw1").token

        credentials.delete(admin.id)

        with pytest.raises(InvalidTokenError):
            auth.verify_token(f"Bearer {token}")

    def test_returns_current_name(
        self, auth: AuthService, credentials: CredentialStore
    ) -> None:
        admin = auth.register("a@x.com", "pw1", "Alice")
        token = auth.login("a@x.com", "pw1").token
        credentials.save(
            Administrator(
                id=admin.id,
                email=admin.email,
                password_hash=admin.password_hash,
                name="Alice B.",
            )
        )

        assert auth.verify_token(f"Bearer {token}").name == "Alice B."

    def test_store_failure_fails_closed(self, tokens: TokenService) -> None:
        credentials = MagicMock()
        credentials.find_by_email.side_effect = RecordStoreError("database down")
        auth = AuthService(credentials=credentials, hasher=PasswordHasher(rounds=4), tokens=tokens)

        with pytest.raises(InvalidTokenError):
            auth.verify_token(f"Bearer {tokens.issue('a@x.com')}")
