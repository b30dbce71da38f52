"""WSGI entry point for BranchLink."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "branchlink.settings")

application = get_wsgi_application()
