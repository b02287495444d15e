SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test/api"
API_TIMEOUT = 5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_COOKIE_SECURE = False
AUTH_COOKIE_MAX_AGE = 60 * 60 * 24 * 7

CURRENCY = "PHP"
ITEMS_PER_PAGE = 10
