from django.db import connections
from django.http import JsonResponse

from records.services.sync import get_sync_service


def healthz(request):
    mode = get_sync_service().mode.value
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1), 'mode': mode})
    except Exception as e:
        return JsonResponse({'ok': False, 'error': str(e), 'mode': mode}, status=500)
