"""
Django settings for the Hide Login site.
"""

import os
from pathlib import Path
import environ

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# Environment variables
env = environ.Env(
    DEBUG=(bool, False)
)

# Read .env file
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env('SECRET_KEY', default='django-insecure-change-this-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env('DEBUG')

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['localhost', '127.0.0.1', 'testserver'])


# Application definition
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party apps
    'corsheaders',

    # Local apps
    'apps.hide_login',
    'apps.authentication',
    'apps.dashboard',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Static files
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'apps.hide_login.middleware.HideLoginMiddleware',  # Login alias + admin guard
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'


# Database
DATABASES = {
    'default': env.db('DATABASE_URL', default='sqlite:///db.sqlite3')
}


# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# Static files (CSS, JavaScript, Images)
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# WhiteNoise configuration
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Trailing slashes on clean URLs; also decides the alias form (/signin/ vs /signin)
APPEND_SLASH = env.bool('APPEND_SLASH', default=True)



# =============================================================================
# CACHING CONFIGURATION
# =============================================================================
# Holds the stored login options between requests
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'hide-login-cache',
    }
}


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================
# The session flag is the only authentication signal
SESSION_COOKIE_AGE = env.int('SESSION_COOKIE_AGE', default=86400)
SESSION_COOKIE_SECURE = env.bool('SESSION_COOKIE_SECURE', default=False)
SESSION_COOKIE_SAMESITE = 'Lax'

# Single configured account
DASHBOARD_USERNAME = env('DASHBOARD_USERNAME', default='admin')
DASHBOARD_PASSWORD = env('DASHBOARD_PASSWORD', default='admin')


# =============================================================================
# HIDE LOGIN CONFIGURATION
# =============================================================================
# Slugs saved on the settings page override LOGIN_SLUG / REDIRECT_SLUG.
# ROUTING: 'clean' (/signin/) or 'query' (/?signin)
# HOME_URL may carry a subdirectory; the login, admin and exempt paths are relative to it.
HIDE_LOGIN = {
    'LOGIN_SLUG': env('HIDE_LOGIN_SLUG', default='signin'),
    'REDIRECT_SLUG': env('HIDE_LOGIN_REDIRECT_SLUG', default='404'),
    'ROUTING': env('HIDE_LOGIN_ROUTING', default='clean'),
    'HOME_URL': env('HIDE_LOGIN_HOME_URL', default='/'),
    'REAL_LOGIN_PATH': '/wp-login.php',
    'ADMIN_PREFIX': '/wp-admin/',
    'SETTINGS_SAVE_PATH': '/wp-admin/options.php',
    'EXEMPT_PATHS': [
        '/wp-admin/admin-post.php',
        '/wp-admin/admin-ajax.php',
    ],
    'REWRITE_EXEMPT_URLS': env.list('HIDE_LOGIN_REWRITE_EXEMPT_URLS', default=[
        'https://wordpress.com/wp-login.php',
    ]),
    'CACHE_TIMEOUT': env.int('HIDE_LOGIN_CACHE_TIMEOUT', default=300),
}


# =============================================================================
# CORS CONFIGURATION
# =============================================================================
# Only the AJAX heartbeat is served cross-origin
CORS_URLS_REGEX = r'^/wp-admin/admin-ajax\.php$'
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=[])
CORS_ALLOW_CREDENTIALS = True


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': env('LOG_LEVEL', default='INFO'),
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': env('LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}


# =============================================================================
# SECURITY SETTINGS
# =============================================================================
if not DEBUG:
    SECURE_SSL_REDIRECT = env.bool('SECURE_SSL_REDIRECT', default=True)
    SECURE_HSTS_SECONDS = env.int('SECURE_HSTS_SECONDS', default=31536000)
    SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
