"""Constants and defaults.

Note: Keep store paths and limits here to avoid magic strings spread across code.
"""

ATTENDANCE_ROOT = "Attendance"
CATEGORIES_ROOT = "categories"
NOTIFICATIONS_ROOT = "notifications"
APPLICATIONS_ROOT = "applications"
PAYMENTS_ROOT = "payments"
MEET_LINKS_ROOT = "GoogleMeet"
ADMIN_LOGIN_PATH = "AdminLogin"

COURSES_COLLECTION = "courses"
HELP_REQUESTS_COLLECTION = "helpRequests"

DEFAULT_COURSE_IMAGE_MB = 2
DEFAULT_HELP_IMAGE_MB = 5

# Characters the realtime database refuses inside a key.
FORBIDDEN_KEY_CHARS = frozenset(".$#[]/")
