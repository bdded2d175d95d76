"""
ASGI entrypoint for the L-Mart backend.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lmartBackend.settings")

application = get_asgi_application()
