import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000/api")
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Cookies only travel over HTTPS in production
SESSION_COOKIE_SECURE = True
AUTH_COOKIE_MAX_AGE = 60 * 60 * 24 * 7

CURRENCY = os.getenv("CURRENCY", "PHP")
ITEMS_PER_PAGE = int(os.getenv("ITEMS_PER_PAGE", "10"))
