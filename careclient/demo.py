"""
Placeholder payloads shown when a list comes back empty.

These never reach the cache or the server; :func:`demo_for` hands out
a fresh copy each time.
"""
from __future__ import annotations

import copy

APPOINTMENTS = [
    {'id': 1, 'doctorName': 'Dr. Michael Chen', 'specialty': 'Cardiologist', 'date': 'May 24, 2023',
     'time': '10:30 AM', 'location': 'City Medical Center', 'isVirtual': False, 'status': 'scheduled'},
    {'id': 2, 'doctorName': 'Dr. Sarah Williams', 'specialty': 'Dermatologist', 'date': 'June 3, 2023',
     'time': '2:15 PM', 'location': 'Virtual Consultation', 'isVirtual': True, 'status': 'scheduled'},
]

HOSPITALS = [
    {'id': 1, 'name': 'City Medical Center', 'address': '123 Medical Ave, Chicago, IL',
     'phoneNumber': '(312) 555-1234', 'rating': 4.5},
    {'id': 2, 'name': 'Memorial Hospital', 'address': '456 Health Blvd, Chicago, IL',
     'phoneNumber': '(312) 555-6789', 'rating': 4.0},
    {'id': 3, 'name': 'University Medical Center', 'address': '789 University Way, Chicago, IL',
     'phoneNumber': '(312) 555-9876', 'rating': 4.8},
]

DOCTORS = [
    {'id': 1, 'name': 'Dr. Michael Chen', 'specialty': 'Cardiologist', 'hospital': 'City Medical Center',
     'availableDays': ['Monday', 'Wednesday', 'Friday'], 'rating': 5},
    {'id': 2, 'name': 'Dr. Sarah Williams', 'specialty': 'Dermatologist', 'hospital': 'Memorial Hospital',
     'availableDays': ['Tuesday', 'Thursday'], 'rating': 4},
]

MEDICAL_RECORDS = [
    {'id': 1, 'title': 'Annual Physical Examination', 'doctorName': 'Dr. Michael Chen',
     'hospital': 'City Medical Center', 'date': '2023-04-12T00:00:00Z'},
    {'id': 2, 'title': 'Blood Test Results', 'doctorName': 'Dr. Sarah Williams',
     'hospital': 'Memorial Hospital', 'date': '2023-03-28T00:00:00Z'},
]

LATEST_HEALTH = {
    'heartRate': 76, 'bloodPressureSystolic': 120, 'bloodPressureDiastolic': 80,
    'bloodGlucose': 98, 'temperature': 986, 'temperatureDisplay': '98.6',
}

DEMO_DATA = {
    '/api/appointments': APPOINTMENTS,
    '/api/hospitals': HOSPITALS,
    '/api/doctors': DOCTORS,
    '/api/medical-records': MEDICAL_RECORDS,
    '/api/health-data/latest': LATEST_HEALTH,
}


def demo_for(key: str):
    path = key.split('?', 1)[0]
    if path not in DEMO_DATA:
        return None
    return copy.deepcopy(DEMO_DATA[path])
