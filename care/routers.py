"""
URL mappings for the CareGuardian API.

Trailing slashes are omitted to match the paths used by the web
front-end.  ``/api/register``, ``/api/login`` and ``/api/logout`` are
kept as aliases of the ``/api/auth/*`` routes.
"""
from django.urls import path

from .views import (
    appointments, assistant, auth, chat, directory, health, health_data,
    location, medical_records, medications, users,
)

urlpatterns = [
    path('healthz', health.healthz, name='healthz'),

    # auth
    path('api/auth/register', auth.register_view, name='register_view'),
    path('api/auth/login', auth.login_view, name='login_view'),
    path('api/auth/logout', auth.logout_view, name='logout_view'),
    path('api/register', auth.register_view),
    path('api/login', auth.login_view),
    path('api/logout', auth.logout_view),

    # users
    path('api/user', users.current_user, name='current_user'),
    path('api/user/profile', users.update_profile, name='update_profile'),
    path('api/user/change-password', users.change_password, name='change_password'),
    path('api/user/delete', users.delete_account, name='delete_account'),
    path('api/users/<int:pk>', users.user_detail, name='user_detail'),

    # appointments
    path('api/appointments', appointments.appointment_collection, name='appointments'),
    path('api/appointments/upcoming', appointments.upcoming_appointments, name='upcoming_appointments'),
    path('api/appointments/past', appointments.past_appointments, name='past_appointments'),
    path('api/appointments/slots/<int:doctor_id>/<str:date>', appointments.available_slots, name='available_slots'),
    path('api/appointments/<int:pk>', appointments.appointment_detail, name='appointment_detail'),
    path('api/appointments/<int:pk>/status', appointments.appointment_status, name='appointment_status'),

    # directory
    path('api/doctors', directory.doctor_collection, name='doctors'),
    path('api/doctors/specialties', directory.doctor_specialties, name='doctor_specialties'),
    path('api/doctors/search', directory.search_doctors, name='doctor_search'),
    path('api/doctors/<int:pk>', directory.doctor_detail, name='doctor_detail'),
    path('api/hospitals', directory.hospital_collection, name='hospitals'),
    path('api/hospitals/<int:pk>', directory.hospital_detail, name='hospital_detail'),
    path('api/hospitals/<int:pk>/doctors', directory.hospital_doctors, name='hospital_doctors'),

    # records & vitals
    path('api/medical-records', medical_records.medical_record_collection, name='medical_records'),
    path('api/medical-records/<int:pk>', medical_records.medical_record_detail, name='medical_record_detail'),
    path('api/health-data', health_data.health_data_collection, name='health_data'),
    path('api/health-data/latest', health_data.health_data_latest, name='health_data_latest'),
    path('api/health-data/<int:pk>', health_data.health_data_detail, name='health_data_detail'),

    # chat & assistant
    path('api/chat/history', chat.chat_history, name='chat_history'),
    path('api/chat/message', chat.chat_message, name='chat_message'),
    path('api/chat/<int:pk>', chat.chat_detail, name='chat_detail'),
    path('api/chat', chat.legacy_chat, name='legacy_chat'),
    path('api/symptom-checker', assistant.symptom_checker, name='symptom_checker'),
    path('api/first-aid-guidance', assistant.first_aid_guidance, name='first_aid_guidance'),

    # medications
    path('api/medications', medications.medication_collection, name='medications'),
    path('api/medications/active', medications.active_medications, name='active_medications'),
    path('api/medications/<int:pk>', medications.medication_detail, name='medication_detail'),
    path('api/medications/<int:pk>/toggle', medications.medication_toggle, name='medication_toggle'),
    path('api/medications/<int:pk>/logs', medications.medication_logs, name='medication_logs'),

    # location proxies
    path('api/location/reverse', location.reverse_geocode, name='location_reverse'),
    path('api/location/hospitals', location.nearby_hospitals, name='location_hospitals'),
]
