import pytest

from portal import create_app
from portal.config import TestConfig
from portal.models import Role
from portal.services import credentials


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def alice(app):
    """A registered user; yields the user's id."""
    with app.app_context():
        user = credentials.register(Role.USER, 'alice', 'pw1', fullname='Alice Liddell', email='alice@example.com')
        return user.id


@pytest.fixture()
def bob(app):
    """A registered admin whose display name is 'Bob'."""
    with app.app_context():
        admin = credentials.register(Role.ADMIN, 'bob', 'adminpw', fullname='Bob', email='bob@example.com')
        return admin.id


@pytest.fixture()
def user_client(client, alice):
    r = client.post('/user/login', data={'username': 'alice', 'password': 'pw1'})
    assert r.status_code == 302
    return client


@pytest.fixture()
def admin_client(client, bob):
    r = client.post('/admin/login', data={'username': 'bob', 'password': 'adminpw'})
    assert r.status_code == 302
    return client
