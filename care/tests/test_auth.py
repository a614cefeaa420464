import pytest
from django.urls import reverse
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from care.models import User
from care.services import users as user_service

pytestmark = pytest.mark.django_db

REGISTER = {
    'username': 'asha',
    'password': 'secret123',
    'email': 'asha@example.com',
    'fullName': 'Asha Rao',
    'phoneNumber': '555-0100',
}


def test_register_creates_user_session_and_token():
    client = APIClient()
    r = client.post(reverse('register_view'), REGISTER, format='json')
    assert r.status_code == 201
    assert r.data['username'] == 'asha'
    assert r.data['fullName'] == 'Asha Rao'
    assert r.data['role'] == 'user'
    assert 'password' not in r.data
    assert Token.objects.filter(key=r.data['token']).exists()

    user = User.objects.get(username='asha')
    assert user.check_password('secret123')
    assert user.password != 'secret123'

    # session cookie authenticates follow-up requests
    me = client.get(reverse('current_user'))
    assert me.status_code == 200
    assert me.data['id'] == user.id


def test_register_alias_path():
    r = APIClient().post('/api/register', REGISTER, format='json')
    assert r.status_code == 201


@pytest.mark.parametrize('field,value', [('username', 'asha'), ('email', 'ASHA@example.com')])
def test_duplicate_username_or_email_conflicts(field, value):
    client = APIClient()
    first = client.post(reverse('register_view'), REGISTER, format='json')
    assert first.status_code == 201

    dup = {**REGISTER, 'username': 'other', 'email': 'other@example.com', field: value}
    r = APIClient().post(reverse('register_view'), dup, format='json')
    assert r.status_code == 409
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'conflict'

    # first user is untouched
    assert User.objects.filter(username='asha').count() == 1
    assert User.objects.get(pk=first.data['id']).email == 'asha@example.com'


def test_register_validates_password_and_email():
    r = APIClient().post(reverse('register_view'), {**REGISTER, 'password': '123', 'email': 'nope'}, format='json')
    assert r.status_code == 400
    assert r.data['error']['code'] == 'invalid'
    assert 'password' in r.data['errors']
    assert 'email' in r.data['errors']
    assert not User.objects.filter(username='asha').exists()


def test_register_ignores_staff_flags_in_body():
    r = APIClient().post(reverse('register_view'), {**REGISTER, 'is_staff': True}, format='json')
    assert r.status_code == 201
    assert User.objects.get(username='asha').is_staff is False


def test_login_success_and_failure(user):
    client = APIClient()
    ok = client.post(reverse('login_view'), {'username': user.username, 'password': 'secret123'}, format='json')
    assert ok.status_code == 200
    assert ok.data['id'] == user.id
    assert ok.data['token']

    bad = APIClient().post(reverse('login_view'), {'username': user.username, 'password': 'wrong'}, format='json')
    assert bad.status_code == 401
    assert bad.data['ok'] is False
    assert bad.data['message'] == 'Invalid username or password'


def test_login_is_throttled(user):
    client = APIClient()
    for _ in range(10):
        client.post(reverse('login_view'), {'username': user.username, 'password': 'wrong'}, format='json')
    r = client.post(reverse('login_view'), {'username': user.username, 'password': 'wrong'}, format='json')
    assert r.status_code == 429


def test_logout_revokes_token(user):
    client = APIClient()
    r = client.post(reverse('login_view'), {'username': user.username, 'password': 'secret123'}, format='json')
    token = r.data['token']
    client.credentials(HTTP_AUTHORIZATION=f'Token {token}')

    out = client.post(reverse('logout_view'))
    assert out.status_code == 200
    assert not Token.objects.filter(key=token).exists()

    fresh = APIClient()
    fresh.credentials(HTTP_AUTHORIZATION=f'Token {token}')
    assert fresh.get(reverse('current_user')).status_code == 401


def test_logout_when_anonymous_is_ok():
    assert APIClient().post(reverse('logout_view')).status_code == 200


def test_anonymous_requests_are_rejected():
    r = APIClient().get(reverse('current_user'))
    assert r.status_code == 401
    assert r.data['error']['code'] == 'not_authenticated'
    for path in ('/api/appointments', '/api/doctors', '/api/hospitals', '/api/medical-records',
                 '/api/health-data', '/api/chat/history', '/api/medications'):
        assert APIClient().get(path).status_code == 401, path


def test_unique_constraint_race_maps_to_conflict(monkeypatch):
    assert APIClient().post(reverse('register_view'), REGISTER, format='json').status_code == 201
    # a concurrent registration slips past the lookup; the database constraint decides
    monkeypatch.setattr(user_service, '_ensure_unique', lambda **kwargs: None)

    r = APIClient().post(reverse('register_view'), {**REGISTER, 'email': 'second@example.com'}, format='json')
    assert r.status_code == 409
    assert r.data['error'] == {'code': 'conflict', 'message': 'Username or email already exists'}
    assert User.objects.filter(username='asha').count() == 1
