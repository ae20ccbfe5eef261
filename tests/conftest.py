"""Shared pytest fixtures."""

import pytest

from jobboard.logging.context import clear_log_context
from jobboard.persistence import JobRepository, close_database, get_session, init_database
from jobboard.web import create_app

from tests.helpers import InMemoryJobStore, make_posting


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep log context from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove job board environment variables."""
    for name in ("DATABASE_URL", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def database():
    """In-memory database initialised for one test."""
    init_database("sqlite:///:memory:")
    yield
    close_database()


@pytest.fixture
def seed(database):
    """Insert postings into the test database."""

    def _seed(*postings):
        with get_session() as session:
            repo = JobRepository(session)
            for posting in postings:
                repo.add(posting)
        return postings

    return _seed


@pytest.fixture
def sample_postings():
    """A small board: three approved postings and one awaiting approval."""
    return [
        make_posting(
            id="msft",
            title="Senior Python Developer",
            company="Microsoft",
            type="Temporary",
            location="Redmond, Washington, United States",
            age_days=1,
        ),
        make_posting(
            id="apple",
            title="Backend Engineer",
            company="Apple",
            location="Cupertino, California, United States",
            age_days=2,
        ),
        make_posting(
            id="shopify",
            title="Data Engineer",
            company="Shopify",
            type="Contract",
            location=None,
            remote=True,
            age_days=3,
        ),
        make_posting(id="pending", title="Unapproved Role", approved=False, age_days=0),
    ]


@pytest.fixture
def store(sample_postings):
    return InMemoryJobStore(sample_postings)


@pytest.fixture
def client(store):
    """Flask test client over the in-memory store."""
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()
