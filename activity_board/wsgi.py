# activity_board/wsgi.py
"""
WSGI entry point of the Activity Board site.

Serves the board pages (``activities`` app) and the DEBUG-only
log viewer (``monitoring`` app) behind any WSGI server, e.g.::

    gunicorn activity_board.wsgi
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "activity_board.settings")

#: The WSGI application callable
application = get_wsgi_application()
