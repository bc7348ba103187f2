# app/config.py
import os

APP_NAME = "NyumbaLink"
TAGLINE = "Luxury Homes. Modern Living."

DB_PATH = os.environ.get("NYUMBALINK_DB_PATH", "db/nyumbalink.db")

LOG_DIR = "logs"
LOG_LEVEL = os.environ.get("NYUMBALINK_LOG_LEVEL", "INFO")

SPLASH_SECONDS = float(os.environ.get("NYUMBALINK_SPLASH_SECONDS", "3"))

# Theme
BACKGROUND = "#121212"
GOLD = "#D4AF37"
DIM_GOLD = "#B8962E"
CARD = "#1E1E1E"
TEXT = "#F5F5F5"

CONTACT_INFO = {
    "Phone": "+254 700 123456",
    "Email": "info@nyumbalink.com",
    "Location": "Riverside Drive, Nairobi",
}

PROFILE = {
    "name": "John Doe",
    "email": "john.doe@example.com",
}
