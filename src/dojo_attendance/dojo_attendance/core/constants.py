"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ADMIN_USER_ID = "admin-1"
UNKNOWN_NAME = "Desconhecido"

STUDENT_ID_PREFIX = "stu"
INSTRUCTOR_ID_PREFIX = "instr"
CLASS_ID_PREFIX = "cls"

DEFAULT_SOCIAL_LOGIN_EMAIL = "social.login@example.com"
