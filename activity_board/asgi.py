# activity_board/asgi.py
"""
ASGI entry point of the Activity Board site.

The views are synchronous; Django runs them in a thread when
served by an ASGI server such as Uvicorn::

    uvicorn activity_board.asgi:application
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "activity_board.settings")

#: The ASGI application callable
application = get_asgi_application()
