from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'demo-secret-key-change-me')
DEBUG = os.environ.get('DJANGO_DEBUG', '1') in {'1', 'true', 'True'}
ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

INSTALLED_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # Project apps
    'activities.apps.ActivitiesConfig',
    'monitoring.apps.MonitoringConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'activity_board.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'activity_board' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'activity_board.context_processors.board_settings',
            ],
        },
    },
]

WSGI_APPLICATION = 'activity_board.wsgi.application'
ASGI_APPLICATION = 'activity_board.asgi.application'

# No model is persisted
DATABASES = {}

# Board state lives in the session, and sessions live in process memory.
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'activity-board',
    }
}
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
MESSAGE_STORAGE = 'django.contrib.messages.storage.session.SessionStorage'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'activity_board' / 'static']

CSRF_TRUSTED_ORIGINS = ['http://127.0.0.1:8000', 'http://localhost:8000']
CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_HTTPONLY = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# External activities API
ACTIVITY_API_BASE_URL = os.getenv('ACTIVITY_API_BASE_URL', 'http://127.0.0.1:8001')
ACTIVITY_API_TIMEOUT = (
    float(os.environ['ACTIVITY_API_TIMEOUT']) if os.getenv('ACTIVITY_API_TIMEOUT') else None
)

# Status area
ACTIVITY_BOARD_STATUS_HIDE_AFTER_MS = 5000

# Monitoring
MONITORING_LOG_DIR = Path(os.getenv('MONITORING_LOG_DIR', BASE_DIR / 'logs'))
