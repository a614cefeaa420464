from django.db import DatabaseError
from django.http import JsonResponse

from care.services.dbhealth import check_database


def healthz(request):
    try:
        ok = check_database()
        return JsonResponse({'ok': ok, 'db': ok}, status=200 if ok else 500)
    except DatabaseError as e:
        return JsonResponse({'ok': False, 'db': False, 'error': str(e)}, status=500)
