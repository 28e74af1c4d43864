"""
Constants for the EasyCal barber shop booking system
"""

# === APPOINTMENT STATUSES ===
STATUS_CONFIRMED = "confirmed"
STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"

APPOINTMENT_STATUSES = (
    STATUS_CONFIRMED,
    STATUS_PENDING,
    STATUS_COMPLETED,
    STATUS_CANCELLED,
)

STATUS_STYLES = {
    STATUS_CONFIRMED: "bg-green-100 text-green-700 border-green-200",
    STATUS_PENDING: "bg-amber-100 text-amber-700 border-amber-200",
    STATUS_COMPLETED: "bg-blue-100 text-blue-700 border-blue-200",
    STATUS_CANCELLED: "bg-red-100 text-red-700 border-red-200",
}

STATUS_LABELS = {
    STATUS_CONFIRMED: "מאושר",
    STATUS_PENDING: "ממתין",
    STATUS_COMPLETED: "הושלם",
    STATUS_CANCELLED: "בוטל",
}

# === MOCK DATA POOLS ===
MOCK_APPOINTMENTS_COUNT = 15
MOCK_APPOINTMENTS_PER_DAY = 3
MOCK_DAYS_BEFORE_BASE = 2

MOCK_CLIENT_NAMES = (
    "דוד לוי", "משה כהן", "אבי ישראלי", "יוסי אברהם",
    "רון דוד", "גיל שמעון", "עמית לוי", "נועם רוזן",
)
MOCK_SERVICES = ("תספורת גבר", "תספורת + זקן", "סידור זקן", "צבע שיער")
MOCK_TIMES = ("09:00", "09:30", "10:00", "10:30", "11:00", "14:00", "15:00", "16:00")
MOCK_STATUSES = (
    STATUS_CONFIRMED, STATUS_CONFIRMED, STATUS_CONFIRMED,
    STATUS_COMPLETED, STATUS_PENDING,
)
# Duration and price are indexed together
MOCK_DURATIONS = (40, 45, 20, 60)
MOCK_PRICES = (100, 130, 70, 180)

# === SERVICE CATALOGUE ===
SERVICES = [
    {"name": "תספורת גבר", "duration": 40, "price": 100},
    {"name": "תספורת + זקן", "duration": 45, "price": 130},
    {"name": "סידור זקן", "duration": 20, "price": 70},
    {"name": "צבע שיער", "duration": 60, "price": 180},
]

# === STATISTICS ===
PERIOD_TODAY = "today"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIOD_YEAR = "year"
PERIODS = (PERIOD_TODAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR)

NO_POPULAR_SERVICE = "-"
# Placeholder trend: previous period is assumed to be 85% of the current one
PREVIOUS_PERIOD_INCOME_RATIO = 0.85

# === CALENDAR ===
VIEW_DAY = "day"
VIEW_WEEK = "week"
VIEW_MONTH = "month"

# Sunday-first, matching the Israeli week
HEBREW_DAY_TAGS = ("א׳", "ב׳", "ג׳", "ד׳", "ה׳", "ו׳", "ש׳")
HEBREW_DAY_NAMES = ("ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת")

HEBREW_MONTHS = (
    "ינואר", "פברואר", "מרץ", "אפריל", "מאי", "יוני",
    "יולי", "אוגוסט", "ספטמבר", "אוקטובר", "נובמבר", "דצמבר",
)
HEBREW_MONTHS_SHORT = (
    "ינו׳", "פבר׳", "מרץ", "אפר׳", "מאי", "יוני",
    "יולי", "אוג׳", "ספט׳", "אוק׳", "נוב׳", "דצמ׳",
)

DATE_PLACEHOLDER = "בחר תאריך"
NO_APPOINTMENTS_TEXT = "אין תורים"
CURRENCY_SYMBOL = "₪"

# === SCHEDULING ===
DEFAULT_SLOT_INTERVAL_MINUTES = 30
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DEFAULT_WORKING_HOURS = (
    {"day": "ראשון", "open": "09:00", "close": "19:00", "is_open": True},
    {"day": "שני", "open": "09:00", "close": "19:00", "is_open": True},
    {"day": "שלישי", "open": "09:00", "close": "19:00", "is_open": True},
    {"day": "רביעי", "open": "09:00", "close": "19:00", "is_open": True},
    {"day": "חמישי", "open": "09:00", "close": "20:00", "is_open": True},
    {"day": "שישי", "open": "08:00", "close": "14:00", "is_open": True},
    {"day": "שבת", "open": "", "close": "", "is_open": False},
)

# === VALIDATION ===
WIZARD_STEP_CLIENT = 1
WIZARD_STEP_SERVICE = 2
WIZARD_STEP_DATETIME = 3

# Israeli mobile: 05X-XXXXXXX or 05XXXXXXXX
PHONE_PATTERN = r"^0[5][0-9][-]?[0-9]{7}$"
TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# === CONFIGURATION DEFAULTS ===
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEZONE = "Asia/Jerusalem"
