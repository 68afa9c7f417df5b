import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Demo roster (1 admin, 2 instructors, 5 students, 5 classes) on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
# Raise NotFoundError instead of silently ignoring unknown ids
STRICT_MODE = bool(int(os.getenv("STRICT_MODE", "0")))
# Reject admin-only mutations from an instructor session inside the core
ENFORCE_ROLES = bool(int(os.getenv("ENFORCE_ROLES", "0")))

SOCIAL_LOGIN_EMAIL = os.getenv("SOCIAL_LOGIN_EMAIL", "social.login@example.com")
