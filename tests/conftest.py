"""
Pytest fixtures: her test kendi in-memory SQLite veritabanına sahip yeni bir app alır.
"""
import copy

import pytest

from librarydesk import create_app
from librarydesk.config import TestConfig
from librarydesk.extensions import db


@pytest.fixture
def app():
    application = create_app(TestConfig)
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


BASE_BORROW = {
    "stud_id": "S-1001",
    "name": "Ayse Yilmaz",
    "age": 12,
    "grade": "7",
    "section": "B",
    "duration": "1-week",
    "isGood": True,
    "returnDate": {"year": 2024, "month": 1, "day": 8},
    "bookDets": {
        "data": {
            "key": "ol-OL123W",
            "title": "The Hobbit",
            "author_name": ["J.R.R. Tolkien"],
            "isbn": ["9780261103344", "0261103342"],
            "subject": ["Fantasy", "Adventure"],
            "coverImageUrl": "https://covers.openlibrary.org/b/id/1-L.jpg",
            "sourceApi": "OpenLibrary",
        }
    },
}

BASE_MEMBER = {
    "stud_id": "S-1001",
    "name": "Ayse Yilmaz",
    "parentPhone": "5551234567",
    "age": 12,
    "grade": "7",
    "section": "B",
}


@pytest.fixture
def borrow_payload():
    def _make(**overrides):
        data = copy.deepcopy(BASE_BORROW)
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def member_payload():
    def _make(**overrides):
        data = copy.deepcopy(BASE_MEMBER)
        data.update(overrides)
        return data
    return _make


@pytest.fixture
def shelf_book():
    def _make(key="ol-OL123W", title="The Hobbit", subject=None):
        return {
            "key": key,
            "title": title,
            "isbn": ["9780261103344"],
            "subject": subject if subject is not None else ["Fantasy"],
            "sourceApi": "OpenLibrary",
        }
    return _make
