import pytest
from django.urls import reverse

from care.models import Medication, MedicationLog

pytestmark = pytest.mark.django_db

MED = {
    'name': 'Metformin', 'dosage': '500mg', 'frequency': 'twice daily',
    'startDate': '2024-01-01T08:00:00Z', 'timeOfDay': 'Morning, Evening', 'withFood': True,
}


def test_create_list_and_toggle(api):
    r = api.post(reverse('medications'), MED, format='json')
    assert r.status_code == 201
    assert r.data['active'] is True
    mid = r.data['id']

    assert [m['id'] for m in api.get(reverse('active_medications')).data] == [mid]

    t = api.patch(reverse('medication_toggle', args=[mid]))
    assert t.data['active'] is False
    assert api.get(reverse('active_medications')).data == []
    assert len(api.get(reverse('medications')).data) == 1


def test_end_date_not_before_start(api):
    r = api.post(reverse('medications'), {**MED, 'endDate': '2023-12-01T00:00:00Z'}, format='json')
    assert r.status_code == 400
    assert 'endDate' in r.data['errors']


def test_dose_logs_newest_first(api):
    mid = api.post(reverse('medications'), MED, format='json').data['id']
    first = api.post(reverse('medication_logs', args=[mid]), {'takenAt': '2024-01-02T08:00:00Z'}, format='json')
    second = api.post(reverse('medication_logs', args=[mid]), {'takenAt': '2024-01-03T08:00:00Z', 'skipped': True}, format='json')
    assert first.status_code == 201 and second.status_code == 201

    logs = api.get(reverse('medication_logs', args=[mid])).data
    assert [log['id'] for log in logs] == [second.data['id'], first.data['id']]
    assert logs[0]['skipped'] is True


def test_medications_are_private(api, other_user):
    med = Medication.objects.create(user=other_user, name='X', dosage='1', frequency='daily',
                                    start_date='2024-01-01T00:00:00Z', time_of_day='Night')
    assert api.get(reverse('medication_detail', args=[med.id])).status_code == 403
    assert api.patch(reverse('medication_toggle', args=[med.id])).status_code == 403
    assert api.post(reverse('medication_logs', args=[med.id]), {}, format='json').status_code == 403
    assert api.delete(reverse('medication_detail', args=[med.id])).status_code == 403
    med.refresh_from_db()
    assert med.active is True


def test_delete_removes_medication_and_its_logs(api, user):
    mid = api.post(reverse('medications'), MED, format='json').data['id']
    api.post(reverse('medication_logs', args=[mid]), {'takenAt': '2024-01-02T08:00:00Z'}, format='json')
    assert MedicationLog.objects.filter(medication_id=mid).count() == 1

    r = api.delete(reverse('medication_detail', args=[mid]))
    assert r.status_code == 204
    assert not Medication.objects.filter(pk=mid).exists()
    assert not MedicationLog.objects.filter(medication_id=mid).exists()
    assert api.get(reverse('medication_detail', args=[mid])).status_code == 404
