import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Backend REST API (Laravel-style routes under /api)
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000/api")
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SESSION_COOKIE_SECURE = False
AUTH_COOKIE_MAX_AGE = 60 * 60 * 24 * 7

CURRENCY = os.getenv("CURRENCY", "PHP")
ITEMS_PER_PAGE = int(os.getenv("ITEMS_PER_PAGE", "10"))
