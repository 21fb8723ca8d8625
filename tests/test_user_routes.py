from portal.extensions import db
from portal.models import Assignment, User


def test_landing_page(client):
    r = client.get('/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'User login' in body
    assert 'Admin login' in body


def test_register_and_login_scenario(client):
    r = client.post('/user/register', data={
        'username': 'alice', 'password': 'pw1', 'fullname': 'Alice', 'email': 'alice@example.com',
    })
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/user/login')

    r = client.post('/user/login', data={'username': 'alice', 'password': 'pw1'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/user/profile')

    r = client.get('/user/profile')
    assert r.status_code == 200
    assert 'alice@example.com' in r.get_data(as_text=True)


def test_register_binds_session(client):
    client.post('/user/register', data={'username': 'alice', 'password': 'pw1'})
    r = client.get('/user/profile')
    assert r.status_code == 200


def test_register_accepts_json(client, app):
    r = client.post('/user/register', json={'username': 'alice', 'password': 'pw1'})
    assert r.status_code == 302
    with app.app_context():
        assert User.query.filter_by(username='alice').count() == 1


def test_register_validation(client, alice):
    r = client.post('/user/register', data={'username': 'bob'})
    assert r.status_code == 400
    assert 'password' in r.get_data(as_text=True)

    r = client.post('/user/register', data={'username': 'alice', 'password': 'x'})
    assert r.status_code == 400
    assert 'already exists' in r.get_data(as_text=True)


def test_login_failures(client, alice):
    r = client.post('/user/login', data={'username': 'alice', 'password': 'wrong'})
    assert r.status_code == 401
    assert 'Invalid credentials' in r.get_data(as_text=True)

    r = client.post('/user/login', data={'username': 'mallory', 'password': 'pw1'})
    assert r.status_code == 401
    assert 'User not found' in r.get_data(as_text=True)

    r = client.get('/user/profile')
    assert r.status_code == 302


def test_protected_pages_redirect_to_login(client):
    for path in ('/user/profile', '/upload'):
        r = client.get(path)
        assert r.status_code == 302
        assert r.headers['Location'].endswith('/user/login')

    r = client.post('/upload', data={'task': 'Grade essays', 'admin': 'Bob'})
    assert r.status_code == 302


def test_upload_page_lists_admins(user_client, bob):
    r = user_client.get('/upload')
    assert r.status_code == 200
    assert '<option value="Bob">Bob</option>' in r.get_data(as_text=True)


def test_upload_without_task_is_rejected(user_client, app):
    r = user_client.post('/upload', data={'admin': 'Bob'})
    assert r.status_code == 400
    data = r.get_json()
    assert data['message'] == 'Missing required fields.'
    assert data['missing'] == ['task']
    with app.app_context():
        assert Assignment.query.count() == 0


def test_upload_creates_pending_assignment(user_client, alice):
    r = user_client.post('/upload', data={'task': 'Grade essays', 'admin': 'Bob'})
    assert r.status_code == 201
    data = r.get_json()
    assert data['message'] == 'Assignment submitted successfully'
    assert data['assignment']['status'] == 'Pending'
    assert data['assignment']['task'] == 'Grade essays'
    assert data['assignment']['admin'] == 'Bob'
    assert data['assignment']['userId'] == str(alice)


def test_upload_keeps_explicit_user_id(user_client):
    r = user_client.post('/upload', json={'userId': 'abc123', 'task': 'Grade essays', 'admin': 'Bob'})
    assert r.status_code == 201
    assert r.get_json()['assignment']['userId'] == 'abc123'


def test_logout(user_client):
    r = user_client.post('/logout')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/')

    r = user_client.get('/user/profile')
    assert r.status_code == 302


def test_deleted_user_is_logged_out(user_client, app, alice):
    with app.app_context():
        db.session.delete(db.session.get(User, alice))
        db.session.commit()

    r = user_client.get('/user/profile')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/user/login')


def test_form_pages_render(client):
    for path, marker in (
        ('/user/login', 'User Login'),
        ('/user/register', 'User Registration'),
        ('/admin/login', 'Admin Login'),
        ('/admin/register', 'Admin Registration'),
    ):
        r = client.get(path)
        assert r.status_code == 200
        body = r.get_data(as_text=True)
        assert marker in body
        assert 'name="username"' in body
        assert 'name="password"' in body


def test_upload_accepts_numeric_json_fields(user_client):
    r = user_client.post('/upload', json={'task': 123, 'admin': 'Bob', 'userId': 7})
    assert r.status_code == 201
    data = r.get_json()['assignment']
    assert data['task'] == '123'
    assert data['userId'] == '7'
    assert data['status'] == 'Pending'


def test_register_and_login_with_numeric_json_fields(client, app):
    r = client.post('/user/register', json={'username': 42, 'password': 1234, 'fullname': 7})
    assert r.status_code == 302
    with app.app_context():
        user = User.query.filter_by(username='42').one()
        assert user.fullname == '7'
        assert user.password_hash != '1234'

    client.post('/logout')
    r = client.post('/user/login', json={'username': 42, 'password': 1234})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/user/profile')
