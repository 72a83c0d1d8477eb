import logging
from typing import Any, Dict, Optional, Tuple
from .errors import AuthError, ConflictError, InternalError, NotFoundError, ValidationError
from .store import SessionStore, UserStore, isoformat, now

logger = logging.getLogger("cohesia")

def _missing(*values) -> bool:
    return any(not v for v in values)


# Hitelesítés a felhasználói tár alapján; a jelszavak nyílt szövegként tárolódnak
class AuthService:
    def __init__(self, users: UserStore, sessions: SessionStore):
        self.users = users
        self.sessions = sessions

    def _start_session(self, user: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        token = self.sessions.create(user["employeeId"], user.get("role"), user.get("name"))
        return token, {
            "role": user.get("role"),
            "name": user.get("name"),
            "employeeId": user["employeeId"],
        }

    def login(self, employee_id: Optional[str], password: Optional[str]) -> Tuple[str, Dict[str, Any]]:
        if _missing(employee_id, password):
            raise ValidationError("Employee ID and password are required")

        user = self.users.find(employee_id)
        # Ismeretlen azonosító és hibás jelszó ugyanazt az üzenetet kapja
        if not user or user.get("password") != password:
            logger.info(f"login_failed user={employee_id}")
            raise AuthError("Invalid employee ID or password")

        token, result = self._start_session(user)
        logger.info(f"login_ok user={employee_id} role={result['role']}")
        return token, result

    # Nincs jelszó- vagy kódellenőrzés, csak az azonosító kell
    def otp_login(self, employee_id: Optional[str]) -> Tuple[str, Dict[str, Any]]:
        if _missing(employee_id):
            raise ValidationError("Employee ID is required")

        user = self.users.find(employee_id)
        if not user:
            logger.info(f"otp_login_failed user={employee_id}")
            raise AuthError("Invalid employee ID")

        token, result = self._start_session(user)
        logger.info(f"otp_login_ok user={employee_id} role={result['role']}")
        return token, result

    def verify_user(self, employee_id: Optional[str]) -> Dict[str, Any]:
        if _missing(employee_id):
            raise ValidationError("Employee ID is required")

        user = self.users.find(employee_id)
        if not user:
            raise NotFoundError("Employee ID not found")

        return {
            "name": user.get("name"),
            "employeeId": user["employeeId"],
            "role": user.get("role"),
            "phoneNumber": user.get("phoneNumber"),
        }

    def register(self, name, employee_id, phone_number, password, role) -> Dict[str, Any]:
        if _missing(name, employee_id, phone_number, password, role):
            raise ValidationError("All fields are required")

        new_user = {
            "name": name,
            "employeeId": employee_id,
            "phoneNumber": phone_number,
            "password": password,
            "role": role,
            "createdAt": isoformat(now()),
        }
        try:
            saved = self.users.append(new_user)
        except ConflictError:
            logger.info(f"register_conflict user={employee_id}")
            raise
        if not saved:
            raise InternalError("Failed to save user data")

        logger.info(f"register_ok user={employee_id} role={role}")
        return {"name": name, "employeeId": employee_id, "role": role}

    def logout(self, token: Optional[str]) -> None:
        record = self.sessions.get(token)
        try:
            self.sessions.destroy(token)
        except Exception as e:
            logger.exception(f"logout_failed err={e}")
            raise InternalError("Error logging out")
        if record:
            logger.info(f"logout_ok user={record.user_id}")

    def check_auth(self, token: Optional[str]) -> Dict[str, Any]:
        record = self.sessions.get(token)
        if not record:
            return {"authenticated": False}
        return {"authenticated": True, "user": record.to_public()}

    def list_users(self):
        return [
            {
                "name": u.get("name"),
                "employeeId": u.get("employeeId"),
                "phoneNumber": u.get("phoneNumber"),
                "role": u.get("role"),
                "createdAt": u.get("createdAt"),
            }
            for u in self.users.read_all()
        ]
