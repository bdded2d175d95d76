"""
WSGI entrypoint for the L-Mart backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lmartBackend.settings")

application = get_wsgi_application()
