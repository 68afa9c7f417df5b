import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
STRICT_MODE = bool(int(os.getenv("STRICT_MODE", "0")))
ENFORCE_ROLES = bool(int(os.getenv("ENFORCE_ROLES", "1")))

SOCIAL_LOGIN_EMAIL = os.getenv("SOCIAL_LOGIN_EMAIL", "social.login@example.com")
