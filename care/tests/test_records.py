import pytest
from django.urls import reverse

from care.models import HealthData, MedicalRecord, format_temperature

pytestmark = pytest.mark.django_db


def test_medical_record_crud(api):
    r = api.post(reverse('medical_records'), {
        'title': 'Blood Test', 'description': '<img src=x>CBC normal', 'doctorName': 'Dr. Meera Iyer',
        'hospital': 'Narayana Hrudayalaya', 'date': '2024-03-01T09:00:00Z',
    }, format='json')
    assert r.status_code == 201
    rid = r.data['id']
    assert r.data['description'] == 'CBC normal'

    assert [x['id'] for x in api.get(reverse('medical_records')).data] == [rid]

    upd = api.patch(reverse('medical_record_detail', args=[rid]), {'title': 'Blood Test (repeat)'}, format='json')
    assert upd.status_code == 200
    assert upd.data['title'] == 'Blood Test (repeat)'

    assert api.delete(reverse('medical_record_detail', args=[rid])).status_code == 204
    assert api.get(reverse('medical_record_detail', args=[rid])).status_code == 404


def test_medical_record_requires_title_and_date(api):
    r = api.post(reverse('medical_records'), {'description': 'no title'}, format='json')
    assert r.status_code == 400
    assert set(r.data['errors']) >= {'title', 'date'}


def test_reading_another_users_record_is_forbidden(api, other_user):
    rec = MedicalRecord.objects.create(user=other_user, title='Private diagnosis',
                                       description='confidential', date='2024-01-01T00:00:00Z')
    r = api.get(reverse('medical_record_detail', args=[rec.id]))
    assert r.status_code == 403
    assert r.data['error']['code'] == 'forbidden'
    assert 'confidential' not in str(r.data)
    assert 'Private diagnosis' not in str(r.data)

    assert api.get(reverse('medical_records')).data == []


def test_temperature_display():
    assert format_temperature(986) == '98.6'
    assert format_temperature(1000) == '100.0'
    assert format_temperature(None) is None


def test_health_data_create_and_display(api):
    r = api.post(reverse('health_data'), {
        'heartRate': 76, 'bloodPressureSystolic': 120, 'bloodPressureDiastolic': 80,
        'bloodGlucose': 98, 'temperature': 986,
    }, format='json')
    assert r.status_code == 201
    assert r.data['temperature'] == 986
    assert r.data['temperatureDisplay'] == '98.6'


def test_latest_health_data(api, user):
    assert api.get(reverse('health_data_latest')).status_code == 404

    HealthData.objects.create(user=user, heart_rate=70, recorded_at='2024-01-01T08:00:00Z')
    HealthData.objects.create(user=user, heart_rate=88, recorded_at='2024-02-01T08:00:00Z')
    HealthData.objects.create(user=user, heart_rate=60, recorded_at='2023-12-01T08:00:00Z')

    r = api.get(reverse('health_data_latest'))
    assert r.status_code == 200
    assert r.data['heartRate'] == 88


def test_health_data_owner_only(api, other_user):
    row = HealthData.objects.create(user=other_user, heart_rate=70)
    assert api.get(reverse('health_data_detail', args=[row.id])).status_code == 403
    assert api.patch(reverse('health_data_detail', args=[row.id]), {'heartRate': 1}, format='json').status_code == 403
    row.refresh_from_db()
    assert row.heart_rate == 70
