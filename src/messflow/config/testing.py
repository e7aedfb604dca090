SECRET_KEY = "test-secret"

THINGSPEAK_BASE_URL = "https://api.thingspeak.test"
THINGSPEAK_CHANNEL_ID = "1"
THINGSPEAK_API_KEY = "test-key"
THINGSPEAK_RESULTS = 2
THINGSPEAK_TIMEOUT_SECONDS = 1.0

POLL_INTERVAL_SECONDS = 15.0
LIVE_FEED_REFRESH_SECONDS = 5

FIELD_MAPPING = "scan"
TIMEZONE = "UTC"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_START_POLLER = False
