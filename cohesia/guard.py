import os
import logging
from functools import wraps
from typing import Optional
from flask import current_app, redirect, session as flask_session
from .errors import PermissionDeniedError
from .store import SessionRecord

logger = logging.getLogger("cohesia")

# Védett oldalak sorrendben: fájlnév -> elvárt szerep.
# Ezeket a generikus statikus útvonal soha nem szolgálja ki.
PROTECTED_PAGES = (
    ("emp_dashboard.html", "employee"),
    ("hr_dashboard.html", "HR"),
)

def is_protected(path: str) -> bool:
    return os.path.basename(path).lower() in {name.lower() for name, _ in PROTECTED_PAGES}

def auth_service():
    return current_app.extensions["cohesia.auth"]

# Aktuális munkamenet lekérése
def current_session() -> Optional[SessionRecord]:
    return auth_service().sessions.get(flask_session.get("sid"))

def _login_redirect():
    return redirect(current_app.config["LOGIN_PAGE"])

def require_auth(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_session():
            return _login_redirect()
        return view(*args, **kwargs)
    return wrapper

def require_role(role: str):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            s = current_session()
            if not s:
                return _login_redirect()
            if s.role != role:
                logger.info(f"access_denied user={s.user_id} role={s.role} required={role}")
                raise PermissionDeniedError("Access denied - insufficient permissions")
            return view(*args, **kwargs)
        return wrapper
    return decorator
