"""
Seed the admin account and the doctor/hospital directory.

Idempotent: the admin user is created only when missing, and doctors or
hospitals are inserted only when their table is empty.  ``--test-users``
also ensures one login per role, resets their password, and gives the
patient a first vitals reading so the dashboard tiles show real data.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from care.models import Doctor, HealthData, Hospital, User

ADMIN = {
    "username": "admin",
    "email": "admin@careguardian.com",
    "full_name": "Admin User",
    "phone_number": "123-456-7890",
}

DOCTORS = [
    {"name": "Dr. Arun Kumar", "specialty": "Cardiologist", "hospital": "Manipal Hospital",
     "phone_number": "+91 80 2502 4444", "email": "dr.arun@manipalhospital.com",
     "profile_image": "https://randomuser.me/api/portraits/men/1.jpg",
     "available_days": ["Monday", "Wednesday", "Friday"], "rating": 4},
    {"name": "Dr. Priya Sharma", "specialty": "Dermatologist", "hospital": "Fortis Hospital",
     "phone_number": "+91 80 6621 4444", "email": "dr.priya@fortis.com",
     "profile_image": "https://randomuser.me/api/portraits/women/2.jpg",
     "available_days": ["Tuesday", "Thursday", "Saturday"], "rating": 5},
    {"name": "Dr. Rajesh Patel", "specialty": "Neurologist", "hospital": "Apollo Hospital",
     "phone_number": "+91 80 4612 3000", "email": "dr.rajesh@apollohospitals.com",
     "profile_image": "https://randomuser.me/api/portraits/men/3.jpg",
     "available_days": ["Monday", "Tuesday", "Thursday", "Friday"], "rating": 4},
    {"name": "Dr. Meera Iyer", "specialty": "Orthopedic Surgeon", "hospital": "Narayana Hrudayalaya",
     "phone_number": "+91 80 7122 2222", "email": "dr.meera@narayanahospital.com",
     "profile_image": "https://randomuser.me/api/portraits/women/4.jpg",
     "available_days": ["Monday", "Wednesday", "Friday", "Saturday"], "rating": 5},
    {"name": "Dr. Suresh Reddy", "specialty": "General Physician", "hospital": "Aster CMI Hospital",
     "phone_number": "+91 80 4342 0100", "email": "dr.suresh@asterhospital.com",
     "profile_image": "https://randomuser.me/api/portraits/men/5.jpg",
     "available_days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"], "rating": 4},
]

TEST_PASSWORD = "123456"
TEST_USERS = [
    ("patient1", "user"),
    ("hospital1", "hospital"),
    ("ambulance1", "ambulance"),
]
PATIENT_VITALS = {
    "heart_rate": 72, "blood_pressure_systolic": 120, "blood_pressure_diastolic": 80,
    "blood_glucose": 95, "temperature": 986,
}

HOSPITALS = [
    {"name": "Manipal Hospital", "address": "98, HAL Airport Road, Bengaluru, Karnataka 560017",
     "phone_number": "+91 80 2502 4444", "email": "info@manipalhospitals.com",
     "logo": "https://via.placeholder.com/150", "rating": 4, "latitude": "12.9582", "longitude": "77.6484"},
    {"name": "Fortis Hospital", "address": "154/9, Bannerghatta Road, Bengaluru, Karnataka 560076",
     "phone_number": "+91 80 6621 4444", "email": "info@fortishospital.com",
     "logo": "https://via.placeholder.com/150", "rating": 4, "latitude": "12.8913", "longitude": "77.5979"},
    {"name": "Apollo Hospital", "address": "154/11, Bannerghatta Road, Bengaluru, Karnataka 560076",
     "phone_number": "+91 80 4612 3000", "email": "info@apollohospitals.com",
     "logo": "https://via.placeholder.com/150", "rating": 5, "latitude": "12.8908", "longitude": "77.5981"},
    {"name": "Narayana Hrudayalaya",
     "address": "258/A, Bommasandra Industrial Area, Anekal Taluk, Bengaluru, Karnataka 560099",
     "phone_number": "+91 80 7122 2222", "email": "info@narayanahospital.com",
     "logo": "https://via.placeholder.com/150", "rating": 5, "latitude": "12.8018", "longitude": "77.6966"},
    {"name": "Aster CMI Hospital", "address": "No. 43/2, New Airport Road, NH 44, Bengaluru, Karnataka 560064",
     "phone_number": "+91 80 4342 0100", "email": "info@asterhospital.com",
     "logo": "https://via.placeholder.com/150", "rating": 4, "latitude": "13.0642", "longitude": "77.5940"},
]


class Command(BaseCommand):
    help = "Create the admin user and seed doctors and hospitals (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--admin-password", default="admin")
        parser.add_argument("--test-users", action="store_true",
                            help=f"ensure patient1/hospital1/ambulance1 with password {TEST_PASSWORD}")

    @transaction.atomic
    def handle(self, *args, **opts):
        if not User.objects.filter(username=ADMIN["username"]).exists():
            User.objects.create_superuser(password=opts["admin_password"], **ADMIN)
            self.stdout.write(self.style.SUCCESS("admin user created"))

        if not Doctor.objects.exists():
            Doctor.objects.bulk_create(Doctor(**d) for d in DOCTORS)
            self.stdout.write(self.style.SUCCESS(f"seeded {len(DOCTORS)} doctors"))

        if not Hospital.objects.exists():
            Hospital.objects.bulk_create(Hospital(**h) for h in HOSPITALS)
            self.stdout.write(self.style.SUCCESS(f"seeded {len(HOSPITALS)} hospitals"))

        if opts["test_users"]:
            self._ensure_test_users()

        self.stdout.write(self.style.SUCCESS("Directory seeded."))

    def _ensure_test_users(self):
        for username, role in TEST_USERS:
            user = User.objects.filter(username=username).first()
            if user is None:
                user = User(username=username, email=f"{username}@example.com", full_name=username.title())
            user.role = role
            user.is_active = True
            user.set_password(TEST_PASSWORD)
            user.save()
            if role == "user" and not user.health_data.exists():
                HealthData.objects.create(user=user, **PATIENT_VITALS)
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({role})"))
