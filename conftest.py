# conftest.py
import pytest

from threaded_comments import create_app


@pytest.fixture
def app():
    """Fresh app (empty store, no users) per test."""
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def comment_service(app):
    return app.services['comments']


@pytest.fixture
def store(app):
    return app.services['comment_store']
