"""
QueryClient against the real API through DRF's in-process RequestsClient.
"""
import pytest
import requests
from rest_framework.authtoken.models import Token
from rest_framework.test import RequestsClient

from care.models import Appointment, MedicalRecord
from careclient import ApiError, PageState, QueryClient, ResourcePage, TransportError

pytestmark = pytest.mark.django_db

BASE = 'http://testserver'


@pytest.fixture
def qc(user):
    token = Token.objects.create(user=user)
    client = QueryClient(BASE, session=RequestsClient(), token=token.key)
    yield client
    client.close()


def test_login_flow_sets_token(user):
    qc = QueryClient(BASE, session=RequestsClient())
    assert qc.fetch('/api/user', on_401='return_none') is None
    with pytest.raises(ApiError) as exc:
        qc.fetch('/api/user', force=True)
    assert exc.value.status == 401

    data = qc.mutate('POST', '/api/auth/login', {'username': 'patient1', 'password': 'secret123'},
                     invalidates=['/api/user'])
    qc.set_token(data['token'])
    assert qc.fetch('/api/user', force=True)['username'] == 'patient1'


def test_fetch_is_cached_until_invalidated(qc, user, doctor):
    assert qc.fetch('/api/appointments') == []
    Appointment.objects.create(user=user, doctor=doctor, date='2024-06-01', time='10:30')
    # served from cache
    assert qc.fetch('/api/appointments') == []

    qc.invalidate('/api/appointments')
    assert len(qc.fetch('/api/appointments')) == 1


def test_mutate_refetches_cached_keys(qc, doctor):
    qc.fetch('/api/appointments')
    seen = []
    unsubscribe = qc.subscribe('/api/appointments', seen.append)

    created = qc.mutate('POST', '/api/appointments',
                        {'doctorId': doctor.id, 'date': '2024-06-01', 'time': '10:30'},
                        invalidates=['/api/appointments', '/api/medical-records'])
    assert created['status'] == 'scheduled'
    assert [a['id'] for a in qc.get_cached('/api/appointments')] == [created['id']]
    assert len(seen) == 1
    # not cached before, so not refetched
    assert not qc.is_cached('/api/medical-records')

    unsubscribe()
    qc.mutate('PATCH', f"/api/appointments/{created['id']}/status", {'status': 'done'},
              invalidates=['/api/appointments'])
    assert len(seen) == 1
    assert qc.get_cached('/api/appointments')[0]['status'] == 'done'


def test_api_error_uses_server_message(qc, other_user):
    rec = MedicalRecord.objects.create(user=other_user, title='x', date='2024-01-01T00:00:00Z')
    with pytest.raises(ApiError) as exc:
        qc.fetch(f'/api/medical-records/{rec.id}')
    assert exc.value.status == 403
    assert exc.value.message == 'You do not have access to this resource'
    assert not qc.is_cached(f'/api/medical-records/{rec.id}')


def test_delete_returns_none(qc, user):
    rec = MedicalRecord.objects.create(user=user, title='x', date='2024-01-01T00:00:00Z')
    assert qc.request('DELETE', f'/api/medical-records/{rec.id}') is None


def test_empty_list_shows_demo_without_caching_it(qc):
    page = ResourcePage(qc, '/api/hospitals')
    assert page.state is PageState.IDLE
    assert page.load() is PageState.SUCCESS
    assert page.is_demo
    assert [h['name'] for h in page.data] == ['City Medical Center', 'Memorial Hospital', 'University Medical Center']
    assert qc.get_cached('/api/hospitals') == []


def test_real_rows_replace_demo(qc, hospital):
    page = ResourcePage(qc, '/api/hospitals')
    page.load()
    assert not page.is_demo
    assert page.data[0]['name'] == 'Manipal Hospital'


def test_latest_health_page_uses_demo_on_404(qc):
    page = ResourcePage(qc, '/api/health-data/latest', empty_on_404=True)
    assert page.load() is PageState.SUCCESS
    assert page.is_demo
    assert page.data['heartRate'] == 76


def test_error_state(user):
    qc = QueryClient(BASE, session=RequestsClient())
    page = ResourcePage(qc, '/api/appointments')
    assert page.load() is PageState.ERROR
    assert page.error.status == 401
    assert page.data is None


def _json_response(body: bytes, status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.headers['Content-Type'] = 'application/json'
    return resp


class UnreachableSession(requests.Session):
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError('connection refused')


def test_unreachable_server_ends_page_in_error():
    qc = QueryClient(BASE, session=UnreachableSession())
    with pytest.raises(TransportError) as exc:
        qc.request('POST', '/api/appointments', {'doctorId': 1})
    assert exc.value.status == 0

    page = ResourcePage(qc, '/api/appointments')
    assert page.load() is PageState.ERROR
    assert isinstance(page.error, ApiError)
    assert 'connection refused' in page.error.message
    assert page.data is None
    assert not qc.is_cached('/api/appointments')


class OverlappingSession(requests.Session):
    """The first GET stalls while a forced refetch of the same key completes."""

    def __init__(self):
        super().__init__()
        self.qc = None
        self.calls = 0

    def request(self, method, url, **kwargs):
        self.calls += 1
        if self.calls == 1:
            assert self.qc.fetch('/api/doctors', force=True) == 'new'
            return _json_response(b'"old"')
        return _json_response(b'"new"')


def test_slow_fetch_does_not_overwrite_newer_result():
    session = OverlappingSession()
    qc = QueryClient(BASE, session=session)
    session.qc = qc
    seen = []
    qc.subscribe('/api/doctors', seen.append)

    # the stale payload is still returned to its own caller
    assert qc.fetch('/api/doctors') == 'old'
    assert qc.get_cached('/api/doctors') == 'new'
    assert seen == ['new']
    assert session.calls == 2
