import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

THINGSPEAK_BASE_URL = os.getenv("THINGSPEAK_BASE_URL", "https://api.thingspeak.com")
THINGSPEAK_CHANNEL_ID = os.getenv("THINGSPEAK_CHANNEL_ID", "3214347")
THINGSPEAK_API_KEY = os.getenv("THINGSPEAK_API_KEY", "407YRZDLITHI1BGO")
THINGSPEAK_RESULTS = int(os.getenv("THINGSPEAK_RESULTS", "2"))
THINGSPEAK_TIMEOUT_SECONDS = float(os.getenv("THINGSPEAK_TIMEOUT_SECONDS", "10"))

POLL_INTERVAL_SECONDS = float(os.getenv("POLL_INTERVAL_SECONDS", "15"))
LIVE_FEED_REFRESH_SECONDS = int(os.getenv("LIVE_FEED_REFRESH_SECONDS", "5"))

FIELD_MAPPING = os.getenv("FIELD_MAPPING", "scan")
TIMEZONE = os.getenv("TIMEZONE", "UTC")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_START_POLLER = bool(int(os.getenv("AUTO_START_POLLER", "1")))
