"""
WSGI config para UserHub.

Expõe o callable WSGI como variável de módulo ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'userhub.config.settings')

application = get_wsgi_application()
