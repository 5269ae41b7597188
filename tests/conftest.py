"""
Party Membership - Test Configuration and Fixtures
"""
import os
import tempfile
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

# keep the application engine away from the working directory
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="party-membership-"), "app.db"
)

from party_membership.api.deps import get_member_service, get_nonce_store, get_settings
from party_membership.core.config import Settings
from party_membership.core.security import NonceStore, hash_admin_key
from party_membership.db.session import build_engine, build_session_factory, init_db
from party_membership.main import app
from party_membership.services.member_service import MemberService

ADMIN_KEY = "correct-horse-battery-staple"


class FrozenClock:
    """Clock whose time only moves when a test says so."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(scope="session")
def admin_key_hash() -> str:
    return hash_admin_key(ADMIN_KEY)


@pytest.fixture
def test_settings(admin_key_hash) -> Settings:
    return Settings(
        ADMIN_KEY_HASH=admin_key_hash,
        ADMIN_PAGE_SIZE=20,
        TIMEZONE="UTC",
    )


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite so several threads can write to the same database."""
    db_engine = build_engine(f"sqlite:///{tmp_path / 'members.db'}")
    init_db(db_engine, counter_name="party_member_counter")
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 3, 5, 10, 30, tzinfo=timezone.utc))


@pytest.fixture
def member_service(session_factory, test_settings, clock) -> MemberService:
    return MemberService(session_factory, test_settings, clock=clock)


@pytest.fixture
def nonce_store() -> NonceStore:
    return NonceStore(ttl_seconds=60)


@pytest.fixture
def client(member_service, test_settings, nonce_store):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_member_service] = lambda: member_service
    app.dependency_overrides[get_nonce_store] = lambda: nonce_store

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    return {"X-Admin-Key": ADMIN_KEY}


@pytest.fixture
def nonce_headers(admin_headers, nonce_store):
    """Build admin headers carrying a freshly issued nonce."""

    def _headers() -> dict:
        return {**admin_headers, "X-Admin-Nonce": nonce_store.issue()}

    return _headers


@pytest.fixture
def make_member_data():
    """Distinct, valid registration payloads keyed by an integer."""

    def _make(n: int) -> dict:
        return {
            "full_name": f"Member {n}",
            "email": f"member{n}@example.com",
            "phone": f"+2547{n:08d}",
            "national_id": f"{1000000 + n}",
        }

    return _make


@pytest.fixture
def member_data() -> dict:
    return {
        "full_name": "Jane Wanjiku",
        "email": "jane@example.com",
        "phone": "+254 712 345 678",
        "national_id": "1234567",
    }
