import os
import logging
from datetime import timedelta
from flask import Flask
from flask_cors import CORS
from .config import Config
from .errors import register_error_handlers
from .store import SessionStore, UserStore
from .service import AuthService
from .api import api_bp
from .views import views_bp
from .maintenance import start_maintenance_thread

# Logging beállítása
def _setup_logging(log_path: str):
    logger = logging.getLogger("cohesia")
    logger.setLevel(logging.INFO)
    path = os.path.abspath(log_path)
    if not any(getattr(h, "baseFilename", None) == path for h in logger.handlers):
        fh = logging.FileHandler(path, encoding="utf-8")
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger

# Flask app létrehozása
def create_app(overrides=None):
    # A beépített static útvonal kikapcsolva, a fájlokat a views blueprint adja
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    app.secret_key = app.config["SECRET_KEY"]
    ttl = timedelta(hours=app.config["SESSION_TTL_HOURS"])
    app.permanent_session_lifetime = ttl

    # Logging
    os.makedirs(os.path.dirname(app.config["LOG_PATH"]) or ".", exist_ok=True)
    _setup_logging(app.config["LOG_PATH"])

    CORS(app, origins=[app.config["CORS_ORIGIN"]], supports_credentials=True)

    # Tárolók és auth service
    sessions = SessionStore(ttl=ttl)
    users = UserStore(app.config["USERS_FILE"])
    app.extensions["cohesia.auth"] = AuthService(users, sessions)

    register_error_handlers(app)
    app.register_blueprint(api_bp)
    app.register_blueprint(views_bp)

    # Karbantartó thread (maintenance.py)
    interval = app.config["SESSION_SWEEP_SECONDS"]
    if interval > 0 and not app.testing:
        start_maintenance_thread(sessions, interval)

    return app
