"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from visitorinfo import create_app
from visitorinfo.extensions import db as _db


CHROME_WIN10 = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.6099.109 Safari/537.36"
)
EDGE_WIN10 = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.2210.91"
)


@pytest.fixture
def app():
    """App wired to an in-memory SQLite database."""
    app = create_app("config.TestingConfig")
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_visitor(db):
    """Insert a VisitorRecord directly, bypassing the API."""
    from visitorinfo.models import VisitorRecord

    def _make(visited_at=None, **fields):
        rec = VisitorRecord(visited_at=visited_at or datetime(2026, 1, 2, 12, 0), **fields)
        db.session.add(rec)
        db.session.commit()
        return rec

    return _make
