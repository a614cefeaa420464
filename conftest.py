import pytest
from django.core.cache import cache
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from care.models import Doctor, Hospital, User


@pytest.fixture(autouse=True)
def _isolate(settings):
    # throttle counters live in the cache
    cache.clear()
    settings.CHATBOT_API_KEY = ''
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
    settings.PAYMENT_LINK_BASE = 'https://careguardian.online/pay'
    yield
    cache.clear()


def make_user(username='patient1', password='secret123', role='user', **extra):
    extra.setdefault('email', f'{username}@example.com')
    extra.setdefault('full_name', username.title())
    return User.objects.create_user(username=username, password=password, role=role, **extra)


@pytest.fixture
def user(db):
    return make_user()


@pytest.fixture
def other_user(db):
    return make_user('patient2')


@pytest.fixture
def hospital_user(db):
    return make_user('hospital1', role='hospital')


def token_client(u):
    client = APIClient()
    token, _ = Token.objects.get_or_create(user=u)
    client.credentials(HTTP_AUTHORIZATION=f'Token {token.key}')
    return client


@pytest.fixture
def client_for():
    return token_client


@pytest.fixture
def api(user):
    return token_client(user)


@pytest.fixture
def doctor(db):
    return Doctor.objects.create(
        name='Dr. Arun Kumar', specialty='Cardiologist', hospital='Manipal Hospital',
        available_days=['Monday', 'Wednesday', 'Friday'], rating=4,
    )


@pytest.fixture
def hospital(db):
    return Hospital.objects.create(
        name='Manipal Hospital', address='98, HAL Airport Road, Bengaluru',
        phone_number='+91 80 2502 4444', rating=4, latitude='12.9582', longitude='77.6484',
    )


@pytest.fixture
def user_factory(db):
    return make_user
