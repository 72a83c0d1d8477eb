import logging
from flask import Blueprint, jsonify, request, session as flask_session
from .guard import auth_service

logger = logging.getLogger("cohesia")
api_bp = Blueprint("api", __name__)

# Csak JSON objektum számít törzsnek, minden más üres
def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

# Munkamenet-azonosító elhelyezése a Flask cookie-ban
def _bind_session(token: str):
    flask_session.clear()
    flask_session["sid"] = token
    flask_session.permanent = True

@api_bp.get("/api/check-auth")
def check_auth():
    return jsonify(auth_service().check_auth(flask_session.get("sid")))

@api_bp.post("/login")
def do_login():
    data = _body()
    token, user = auth_service().login(data.get("employeeId"), data.get("password"))
    _bind_session(token)
    return jsonify({"success": True, **user})

@api_bp.post("/otp-login")
def do_otp_login():
    token, user = auth_service().otp_login(_body().get("employeeId"))
    _bind_session(token)
    return jsonify({"success": True, **user})

@api_bp.post("/logout")
def do_logout():
    auth_service().logout(flask_session.get("sid"))
    flask_session.clear()
    return jsonify({"success": True, "message": "Logged out successfully"})

@api_bp.post("/register")
def do_register():
    data = _body()
    user = auth_service().register(
        data.get("name"),
        data.get("employeeId"),
        data.get("phoneNumber"),
        data.get("password"),
        data.get("role"),
    )
    return jsonify({"success": True, "message": "User registered successfully", "user": user}), 201

# Nincs hitelesítés: belső eszköznek szánt lista
@api_bp.get("/users")
def list_users():
    return jsonify(auth_service().list_users())

@api_bp.post("/verify-user")
def verify_user():
    user = auth_service().verify_user(_body().get("employeeId"))
    return jsonify({"success": True, "user": user})

@api_bp.get("/health")
def health():
    return jsonify({"status": "OK", "message": "Server is running"})
