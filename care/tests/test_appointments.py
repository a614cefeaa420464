"""
Booking, ownership and confirmation email behaviour of the
appointments API.
"""
from smtplib import SMTPException

from django.core import mail
from django.urls import reverse
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from care.models import Appointment, Doctor, Hospital, User
from care.services import notifications


class AppointmentAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username='patient1', password='secret123', email='patient1@example.com', full_name='Patient One',
        )
        self.other = User.objects.create_user(
            username='patient2', password='secret123', email='patient2@example.com', full_name='Patient Two',
        )
        self.doctor = Doctor.objects.create(name='Dr. Arun Kumar', specialty='Cardiologist')
        self.hospital = Hospital.objects.create(name='Manipal Hospital', address='HAL Airport Road',
                                                phone_number='+91 80 2502 4444')
        self.token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {self.token.key}')

    def book(self, **overrides):
        body = {'userId': self.user.id, 'doctorId': self.doctor.id, 'date': '2024-06-01',
                'time': '10:30', 'isVirtual': False}
        body.update(overrides)
        return self.client.post(reverse('appointments'), body, format='json')

    def test_create_returns_scheduled_row_listed_for_owner(self):
        r = self.book()
        self.assertEqual(r.status_code, 201)
        self.assertGreater(r.data['id'], 0)
        self.assertEqual(r.data['status'], 'scheduled')
        self.assertEqual(r.data['userId'], self.user.id)
        self.assertEqual(r.data['doctorName'], 'Dr. Arun Kumar')
        self.assertIsNone(r.data['hospitalId'])

        detail = self.client.get(reverse('appointment_detail', args=[r.data['id']]))
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.data['date'], '2024-06-01')
        self.assertEqual(detail.data['time'], '10:30')

        listing = self.client.get(reverse('appointments'), {'userId': self.user.id})
        self.assertEqual(listing.status_code, 200)
        self.assertIn(r.data['id'], [a['id'] for a in listing.data])

    def test_owner_comes_from_session_not_body(self):
        r = self.book(userId=self.other.id)
        self.assertEqual(r.status_code, 201)
        self.assertEqual(Appointment.objects.get(pk=r.data['id']).user_id, self.user.id)

    def test_listing_another_users_appointments_is_forbidden(self):
        r = self.client.get(reverse('appointments'), {'userId': self.other.id})
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.data['error']['code'], 'forbidden')

    def test_unknown_doctor_is_a_reference_error(self):
        r = self.book(doctorId=9999)
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data['error']['code'], 'invalid_reference')
        self.assertFalse(Appointment.objects.exists())

        r = self.book(hospitalId=9999)
        self.assertEqual(r.data['error']['code'], 'invalid_reference')

    def test_missing_fields_are_rejected(self):
        r = self.client.post(reverse('appointments'), {'doctorId': self.doctor.id}, format='json')
        self.assertEqual(r.status_code, 400)
        self.assertIn('date', r.data['errors'])
        self.assertIn('time', r.data['errors'])

    def test_confirmation_email_has_payment_link(self):
        r = self.book(hospitalId=self.hospital.id, notes='Chest pain after exercise')
        self.assertTrue(r.data['confirmationSent'])
        self.assertEqual(len(mail.outbox), 1)
        msg = mail.outbox[0]
        self.assertEqual(msg.to, ['patient1@example.com'])
        self.assertIn(f"https://careguardian.online/pay/{r.data['id']}", msg.body)
        self.assertIn('Manipal Hospital', msg.body)
        self.assertIn('In-person Visit', msg.body)

    def test_email_failure_keeps_appointment(self):
        def broken_send(*args, **kwargs):
            raise SMTPException('smtp down')

        original = notifications.send_mail
        notifications.send_mail = broken_send
        try:
            r = self.book()
        finally:
            notifications.send_mail = original
        self.assertEqual(r.status_code, 201)
        self.assertFalse(r.data['confirmationSent'])
        self.assertTrue(Appointment.objects.filter(pk=r.data['id']).exists())

    def test_other_users_cannot_read_or_change(self):
        appt = Appointment.objects.create(user=self.other, doctor=self.doctor, date='2024-06-01', time='09:00')
        self.assertEqual(self.client.get(reverse('appointment_detail', args=[appt.id])).status_code, 403)
        r = self.client.patch(reverse('appointment_status', args=[appt.id]), {'status': 'cancelled'}, format='json')
        self.assertEqual(r.status_code, 403)
        appt.refresh_from_db()
        self.assertEqual(appt.status, 'scheduled')
        self.assertEqual(self.client.delete(reverse('appointment_detail', args=[appt.id])).status_code, 403)

    def test_status_update_accepts_any_string(self):
        appt_id = self.book().data['id']
        r = self.client.patch(reverse('appointment_status', args=[appt_id]), {'status': 'rescheduled-twice'}, format='json')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data['status'], 'rescheduled-twice')

        missing = self.client.patch(reverse('appointment_status', args=[appt_id]), {}, format='json')
        self.assertEqual(missing.status_code, 400)

    def test_patch_and_delete(self):
        appt_id = self.book().data['id']
        r = self.client.patch(reverse('appointment_detail', args=[appt_id]), {'time': '11:00', 'isVirtual': True}, format='json')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data['time'], '11:00')
        self.assertTrue(r.data['isVirtual'])

        self.assertEqual(self.client.delete(reverse('appointment_detail', args=[appt_id])).status_code, 204)
        self.assertEqual(self.client.get(reverse('appointment_detail', args=[appt_id])).status_code, 404)

    def test_deleting_booked_doctor_conflicts_and_hospital_detaches(self):
        staff = User.objects.create_user(username='ops', password='secret123', email='ops@example.com',
                                         full_name='Ops', role='hospital')
        appt_id = self.book(hospitalId=self.hospital.id).data['id']
        self.client.credentials(HTTP_AUTHORIZATION=f'Token {Token.objects.create(user=staff).key}')

        r = self.client.delete(reverse('doctor_detail', args=[self.doctor.id]))
        self.assertEqual(r.status_code, 409)
        self.assertTrue(Doctor.objects.filter(pk=self.doctor.id).exists())

        r = self.client.delete(reverse('hospital_detail', args=[self.hospital.id]))
        self.assertEqual(r.status_code, 204)
        self.assertIsNone(Appointment.objects.get(pk=appt_id).hospital_id)

    def test_available_slots_skip_booked_times_and_off_days(self):
        mondays = Doctor.objects.create(name='Dr. Meera Iyer', specialty='Orthopedic Surgeon',
                                        available_days=['Monday'])
        self.book(doctorId=mondays.id, date='2024-06-03', time='09:30')
        cancelled = self.book(doctorId=mondays.id, date='2024-06-03', time='10:00').data['id']
        self.client.patch(reverse('appointment_status', args=[cancelled]), {'status': 'cancelled'}, format='json')

        r = self.client.get(reverse('available_slots', args=[mondays.id, '2024-06-03']))
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data['slots'][:3], ['09:00', '10:00', '10:30'])
        self.assertEqual(r.data['slots'][-1], '16:30')
        self.assertEqual(len(r.data['slots']), 15)

        # 2024-06-04 is a Tuesday
        tuesday = self.client.get(reverse('available_slots', args=[mondays.id, '2024-06-04']))
        self.assertEqual(tuesday.data['slots'], [])

        # no working days listed means every day is open
        any_day = self.client.get(reverse('available_slots', args=[self.doctor.id, '2024-06-04']))
        self.assertEqual(len(any_day.data['slots']), 16)

    def test_available_slots_validation(self):
        bad = self.client.get(reverse('available_slots', args=[self.doctor.id, '2024-13-40']))
        self.assertEqual(bad.status_code, 400)
        self.assertIn('date', bad.data['errors'])
        self.assertEqual(self.client.get(reverse('available_slots', args=[999, '2024-06-03'])).status_code, 404)

    def test_upcoming_and_past_lists(self):
        future = self.book(date='2099-01-05').data['id']
        soon = self.book(date='2099-01-01').data['id']
        old = self.book(date='2000-01-01').data['id']
        dropped = self.book(date='2099-02-01').data['id']
        self.client.patch(reverse('appointment_status', args=[dropped]), {'status': 'cancelled'}, format='json')
        Appointment.objects.create(user=self.other, doctor=self.doctor, date='2099-01-01', time='09:00')

        upcoming = self.client.get(reverse('upcoming_appointments'))
        self.assertEqual([a['id'] for a in upcoming.data], [soon, future])

        past = self.client.get(reverse('past_appointments'))
        self.assertEqual([a['id'] for a in past.data], [dropped, old])
