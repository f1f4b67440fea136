import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SESSION_HOURS = int(os.getenv("SESSION_HOURS", "24"))

# Ticket numbers issued by the accounts desk, e.g. NAZ-24-1234
TICKET_PREFIX = os.getenv("TICKET_PREFIX", "NAZ")

# All data lives in memory, so a fresh process needs an account to sign in with.
SEED_ADMIN = bool(int(os.getenv("SEED_ADMIN", "1")))
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_FULL_NAME = os.getenv("ADMIN_FULL_NAME", "Administrator")
