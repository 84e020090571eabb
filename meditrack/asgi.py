"""
ASGI config for the meditrack project.

Only plain HTTP is served; the records API holds no long-lived connections.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "meditrack.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
