SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SEED_DEMO_DATA = True
STRICT_MODE = False
ENFORCE_ROLES = False

SOCIAL_LOGIN_EMAIL = "social.login@example.com"
