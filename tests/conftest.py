"""Shared test fixtures for bloglist.

Every test that touches storage gets a fresh temp-file SQLite database.
"""

import pytest

from bloglist.auth import schemas, service, token as auth_token
from bloglist.config import Settings
from bloglist.db import get_core, init_db
from bloglist.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temp database, with a cheap bcrypt cost."""
    return Settings(
        database_path=str(tmp_path / "bloglist.db"),
        jwt_secret_key=TEST_SECRET,
        bcrypt_work_factor=4,
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def core(settings):
    """Autocommit Core on an initialized database."""
    init_db(settings.database_path)
    core = get_core(settings.database_path)
    yield core
    core.close()


def _create_user(core, settings, username, name, password):
    data = schemas.UserCreate(username=username, name=name, password=password)
    user = service.create_user(core, data, settings.bcrypt_work_factor)
    return schemas.UserSummary(id=user.id, username=user.username, name=user.name)


@pytest.fixture
def test_user(core, settings):
    """Create a test user. Returns (UserSummary, password)."""
    password = "sekret"
    return _create_user(core, settings, "root", "Superuser", password), password


@pytest.fixture
def other_user(core, settings):
    """A second user who owns nothing."""
    return _create_user(core, settings, "mluukkai", "Matti Luukkainen", "salainen")


@pytest.fixture
def auth_headers(test_user, settings):
    """Authorization header with a JWT for test_user."""
    user, _password = test_user
    jwt_token = auth_token.generate_access_token(user, settings.jwt_secret_key)
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def other_auth_headers(other_user, settings):
    jwt_token = auth_token.generate_access_token(other_user, settings.jwt_secret_key)
    return {"Authorization": f"Bearer {jwt_token}"}


INITIAL_BLOGS = [
    {
        "title": "HTML is easy",
        "author": "Edsger W. Dijkstra",
        "url": "http://example.com/html",
        "likes": 5,
    },
    {
        "title": "Browser can execute only JavaScript",
        "author": "Robert C. Martin",
        "url": "http://example.com/js",
        "likes": 2,
    },
]


@pytest.fixture
def initial_blogs(core, test_user):
    """Two blogs owned by test_user. Returns their ids in insertion order."""
    user, _password = test_user
    blog_ids = []
    for blog in INITIAL_BLOGS:
        blog_id = core.blog.insert(owner=user.id, **blog)
        core.user.append_blog(user.id, blog_id)
        blog_ids.append(blog_id)
    return blog_ids
