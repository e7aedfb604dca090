"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MESS_HALLS = (1, 2, 3)
DEFAULT_MESS_HALL = 1

SERVICE_FIRST_HOUR = 7
SERVICE_LAST_HOUR = 21

DEFAULT_RECENT_SCANS = 50
DEFAULT_PAGE_SIZE = 20
DEFAULT_TREND_DAYS = 7

SUCCESS_MARKERS = ("GRANTED", "SUCCESS", "OK")
MISSING_MARKERS = ("", "null", "none", "undefined")

CSV_EXPORT_HEADER = ("UID", "Date", "Day", "Time", "Meal Time", "Mess Hall No", "Status")

UPLOAD_MAX_BYTES = 10 * 1024 * 1024
UPLOAD_TEMPLATE_CSV = (
    "UID,Date,Day,Time,Meal_Time,Mess_Hall_No\n"
    "UID0001,2024-01-15,Monday,08:30,Breakfast,1\n"
    "UID0002,2024-01-15,Monday,12:45,Lunch,2\n"
    "UID0003,2024-01-15,Monday,19:15,Dinner,3\n"
    "UID0004,2024-01-15,Monday,16:30,Snacks,1"
)
