"""
WSGI config for ProductCatalogService.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ProductCatalogService.settings.dev")

application = get_wsgi_application()
