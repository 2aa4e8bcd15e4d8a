import os

# ---------------------------
# Firebase Realtime Database
# ---------------------------
FIREBASE_DB_URL = os.getenv(
    "FIREBASE_DB_URL", "https://wellbeing-compass-default-rtdb.firebaseio.com"
).rstrip("/")
FIREBASE_AUTH_TOKEN = os.getenv("FIREBASE_AUTH_TOKEN")
ASSESSMENTS_NODE = os.getenv("ASSESSMENTS_NODE", "assessments")

# ---------------------------
# Outbound calls
# ---------------------------
ASSESSMENTS_API_URL = os.getenv("ASSESSMENTS_API_URL", "http://localhost:8000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "8"))

COACH_EMAIL = os.getenv("COACH_EMAIL", "coach@example.com")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
