import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-servicedesk-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '1') == '1'

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'core',
    'users',
    'tickets',
    'assets',
    'dashboard',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'core.middleware.DeskSessionMiddleware',
]

ROOT_URLCONF = 'servicedesk.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

ASGI_APPLICATION = 'servicedesk.asgi.application'
WSGI_APPLICATION = 'servicedesk.wsgi.application'

# PostgreSQL when DESK_DB_NAME is set, SQLite otherwise
if os.environ.get('DESK_DB_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ['DESK_DB_NAME'],
            'USER': os.environ.get('DESK_DB_USER', 'postgres'),
            'PASSWORD': os.environ.get('DESK_DB_PASSWORD', ''),
            'HOST': os.environ.get('DESK_DB_HOST', 'localhost'),
            'PORT': os.environ.get('DESK_DB_PORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'servicedesk.sqlite3',
        }
    }

LANGUAGE_CODE = 'en-us'
LANGUAGES = [
    ('en', 'English'),
]
USE_I18N = True
TIME_ZONE = 'UTC'
USE_TZ = True
STATIC_URL = 'static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# JSON endpoints are csrf_exempt; the session cookie must not ride cross-site POSTs
SESSION_COOKIE_SAMESITE = 'Lax'
SESSION_COOKIE_HTTPONLY = True

DEFAULT_FROM_EMAIL = os.environ.get('DESK_FROM_EMAIL', 'servicedesk@example.com')
EMAIL_BACKEND = os.environ.get('DESK_EMAIL_BACKEND', 'django.core.mail.backends.console.EmailBackend')

# Celery, read by servicedesk/celery.py with the CELERY_ namespace
CELERY_BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_TASK_ALWAYS_EAGER = os.environ.get('CELERY_TASK_ALWAYS_EAGER', '1') == '1'
CELERY_TASK_IGNORE_RESULT = True

DESK_LOG_LEVEL = os.environ.get('DESK_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'desk': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'desk',
        },
    },
    'loggers': {
        'servicedesk': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
        'core': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
        'users': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
        'tickets': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
        'assets': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
        'dashboard': {'handlers': ['console'], 'level': DESK_LOG_LEVEL, 'propagate': False},
    },
}
