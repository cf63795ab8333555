# src/config/settings/development.py
"""
Development settings for MOT Refund Service
"""

from .base import *

DEBUG = True

ALLOWED_HOSTS = ['*']

# SQLite keeps the demo self-contained; set DB_ENGINE to use PostgreSQL
DATABASES = {
    'default': {
        'ENGINE': os.environ.get('DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('DB_NAME', str(BASE_DIR / 'db.sqlite3')),
        'USER': os.environ.get('DB_USER', ''),
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),
        'HOST': os.environ.get('DB_HOST', ''),
        'PORT': os.environ.get('DB_PORT', ''),
    }
}

# CORS - Allow all in development
CORS_ALLOW_ALL_ORIGINS = True

# Plain static storage (no manifest needed without collectstatic)
STORAGES['staticfiles'] = {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'}

# Simplified logging
LOGGING['handlers']['console']['formatter'] = 'standard'
LOGGING['root']['level'] = 'DEBUG'
