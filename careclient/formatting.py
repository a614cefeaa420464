from __future__ import annotations

PLACEHOLDER = '—'


def format_temperature(tenths: int | None) -> str:
    """Stored integer tenths to a one-decimal display value (986 -> '98.6')."""
    if tenths is None:
        return PLACEHOLDER
    return f"{tenths / 10:.1f}"


def format_blood_pressure(systolic: int | None, diastolic: int | None) -> str:
    if not systolic or not diastolic:
        return PLACEHOLDER
    return f"{systolic}/{diastolic}"


def health_stats(row: dict | None) -> list[dict]:
    """Dashboard tiles for a health-data payload."""
    row = row or {}
    return [
        {'label': 'Heart Rate', 'value': str(row['heartRate']) if row.get('heartRate') else PLACEHOLDER, 'unit': 'BPM'},
        {'label': 'Blood Pressure',
         'value': format_blood_pressure(row.get('bloodPressureSystolic'), row.get('bloodPressureDiastolic')),
         'unit': 'mmHg'},
        {'label': 'Blood Glucose', 'value': str(row['bloodGlucose']) if row.get('bloodGlucose') else PLACEHOLDER, 'unit': 'mg/dL'},
        {'label': 'Body Temperature', 'value': format_temperature(row.get('temperature')), 'unit': '°F'},
    ]
