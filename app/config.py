# app/config.py

API_TITLE = "People API"
API_VERSION = "0.1.0"

HOST = "127.0.0.1"
PORT = 3000

# Only this frontend may read responses cross-origin
ALLOWED_ORIGIN = "https://your-frontend-site.com"
ALLOWED_METHODS = ["GET", "POST"]
ALLOWED_HEADERS = ["Content-Type"]
