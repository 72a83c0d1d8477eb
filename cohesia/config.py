import os
from datetime import timedelta

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "cohesia-secret-key-change-this-in-production")

    # Adatfájlok
    USERS_FILE = os.environ.get("USERS_FILE", os.path.join(_ROOT, "users.json"))
    STATIC_DIR = os.environ.get("STATIC_DIR", os.path.join(_ROOT, "public"))
    LOGIN_PAGE = os.environ.get("LOGIN_PAGE", "/login.html")

    # Munkamenetek
    SESSION_TTL_HOURS = int(os.environ.get("SESSION_TTL_HOURS", "24"))
    SESSION_SWEEP_SECONDS = int(os.environ.get("SESSION_SWEEP_SECONDS", "300"))

    # Flask cookie (secure=False: sima HTTP-t feltételezünk)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False
    PERMANENT_SESSION_LIFETIME = timedelta(hours=SESSION_TTL_HOURS)

    CORS_ORIGIN = os.environ.get("CORS_ORIGIN", "http://localhost:3000")
    PORT = int(os.environ.get("PORT", "3000"))

    LOG_PATH = os.environ.get("LOG_PATH", "logs/app.log")
