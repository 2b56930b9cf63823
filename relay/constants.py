"""Constants used throughout the notification relay application."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Rate Limiting Defaults
DEFAULT_RATE_LIMIT_REQUESTS = 100  # Number of requests
DEFAULT_RATE_LIMIT_WINDOW = 60  # Time window in seconds

# Performance Thresholds
SLOW_REQUEST_THRESHOLD = 1.0  # Log requests slower than 1 second

# Security Headers
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

# Push rendering
PUSH_ACCENT_COLOR = "#006AF5"
QUOTE_PREVIEW_LENGTH = 50
DEFAULT_ACTOR_NAME = "Someone"

REACTION_EMOJIS = {
    "like": "👍",
    "love": "❤️",
    "haha": "😆",
    "wow": "😮",
    "sad": "😢",
    "angry": "😡",
}

# FCM HTTP v1
FCM_SEND_URL = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"
FCM_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"

# Email address format shared by the OTP flow and the mail transport
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
