"""
Django admin registrations for the care models.

Superusers can inspect and edit accounts, the directory and patient
data at ``/admin/``.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserCreationForm

from .models import (
    Appointment,
    ChatMessage,
    Doctor,
    HealthData,
    Hospital,
    MedicalRecord,
    Medication,
    MedicationLog,
    User,
)


class UserCreateForm(UserCreationForm):
    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('username', 'email', 'full_name', 'role')


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    add_form = UserCreateForm
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('username', 'email', 'full_name', 'role',
                                               'password1', 'password2')}),
    )
    list_display = ('username', 'email', 'full_name', 'role', 'is_staff')
    list_filter = ('role', 'is_staff')
    search_fields = ('username', 'email', 'full_name')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('full_name', 'phone_number', 'date_of_birth', 'gender',
                                'address', 'profile_image', 'role')}),
    )


@admin.register(HealthData)
class HealthDataAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'heart_rate', 'blood_pressure_systolic',
                    'blood_pressure_diastolic', 'temperature', 'recorded_at')
    search_fields = ('user__username',)


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'title', 'doctor_name', 'hospital', 'date')
    search_fields = ('title', 'user__username', 'doctor_name')


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'specialty', 'hospital', 'rating')
    list_filter = ('specialty',)
    search_fields = ('name', 'specialty', 'hospital')


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'phone_number', 'rating')
    search_fields = ('name', 'address')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'doctor', 'hospital', 'date', 'time', 'is_virtual', 'status')
    list_filter = ('status', 'is_virtual')
    search_fields = ('user__username', 'doctor__name')


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'is_user_message', 'timestamp')
    search_fields = ('user__username', 'message')


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'name', 'dosage', 'frequency', 'active')
    list_filter = ('active',)
    search_fields = ('name', 'user__username')


@admin.register(MedicationLog)
class MedicationLogAdmin(admin.ModelAdmin):
    list_display = ('id', 'medication', 'user', 'taken_at', 'skipped')
