import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SESSION_HOURS = int(os.getenv("SESSION_HOURS", "24"))

TICKET_PREFIX = os.getenv("TICKET_PREFIX", "NAZ")

# Off unless asked for; seeding then needs ADMIN_PASSWORD from the environment.
SEED_ADMIN = bool(int(os.getenv("SEED_ADMIN", "0")))
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
ADMIN_FULL_NAME = os.getenv("ADMIN_FULL_NAME", "Administrator")
