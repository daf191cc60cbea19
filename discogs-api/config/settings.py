# config/settings.py
import environ
from pathlib import Path

# Build paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environ
env = environ.Env(
    DEBUG=(bool, False),
    DISCOGS_USER_AGENT=(str, ""),
    DISCOGS_TOKEN=(str, ""),
    DISCOGS_CURRENCY=(str, "USD"),
    DISCOGS_API_BASE_URL=(str, "https://api.discogs.com"),
    DISCOGS_LOG_LEVEL=(str, "WARNING"),
)
# Load environment variables from .env file
environ.Env.read_env(BASE_DIR / '.env')

# Only needed by Django itself; the client never signs anything
SECRET_KEY = env('SECRET_KEY', default='dummy-key-for-build-only-replace-in-production')
DEBUG = env('DEBUG')

INSTALLED_APPS = [
    'discogs.apps.DiscogsConfig',
]

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Discogs API
DISCOGS_USER_AGENT = env("DISCOGS_USER_AGENT")
DISCOGS_TOKEN = env("DISCOGS_TOKEN")
DISCOGS_CURRENCY = env("DISCOGS_CURRENCY")
DISCOGS_API_BASE_URL = env("DISCOGS_API_BASE_URL")

# Logging: request lines at DEBUG, rate limiting at WARNING
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'discogs': {
            'handlers': ['console'],
            'level': env("DISCOGS_LOG_LEVEL"),
            'propagate': False,
        },
    },
}
