"""
Django settings for the task list project.

All deployment-specific values come from the environment:
- DJANGO_SECRET_KEY
- DJANGO_DEBUG (true/false)
- DJANGO_ALLOWED_HOSTS (comma separated)
- LOG_LEVEL
- HTMX_SCRIPT_URL
"""
import os
from pathlib import Path

from .logging_config import get_log_level, get_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-local-development-key')

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'ninja',
    'apps.tasks.apps.TasksConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'

# The task store lives in memory; nothing is persisted.
DATABASES = {}

# /tasks and /tasks/{id}/delete are exact paths.
APPEND_SLASH = False

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# htmx is loaded by the base template; set to an empty string to serve the
# page without it (plain mode only).
HTMX_SCRIPT_URL = os.getenv('HTMX_SCRIPT_URL', 'https://unpkg.com/htmx.org@2.0.4')

LOGGING = get_logging_config(get_log_level())
