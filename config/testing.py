SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_HOURS = 24

TICKET_PREFIX = "NAZ"

SEED_ADMIN = True
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"
ADMIN_FULL_NAME = "Test Admin"
