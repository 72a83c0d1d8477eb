import os
import json
import secrets
import logging
import tempfile
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Any
from .errors import ConflictError

logger = logging.getLogger("cohesia")
DEFAULT_FILE_MODE = 0o644

def now() -> datetime:
    return datetime.now(timezone.utc)

def isoformat(ts: datetime) -> str:
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# JSON fájlban tárolt felhasználók: {"users": [...]}
# Írás zár alatt, ideiglenes fájlon keresztül, atomi cserével
class UserStore:
    def __init__(self, path: str):
        self.path = path
        self._lock = threading.RLock()

    # Felhasználók beolvasása; hibás vagy hiányzó fájl -> üres lista
    def read_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                logger.warning(f"users_file_missing path={self.path}")
                return []
            except (OSError, ValueError) as e:
                logger.warning(f"users_read_failed path={self.path} err={e}")
                return []

        users = data.get("users") if isinstance(data, dict) else None
        if not isinstance(users, list):
            logger.warning(f"users_malformed path={self.path}")
            return []
        return users

    def find(self, employee_id: str) -> Optional[Dict[str, Any]]:
        return next((u for u in self.read_all() if u.get("employeeId") == employee_id), None)

    # Új felhasználó hozzáfűzése; False, ha az írás nem sikerült
    def append(self, user: Dict[str, Any]) -> bool:
        with self._lock:
            users = self.read_all()
            if any(u.get("employeeId") == user.get("employeeId") for u in users):
                raise ConflictError("Employee ID already exists")
            users.append(user)
            return self._write(users)

    def _file_mode(self) -> int:
        try:
            return os.stat(self.path).st_mode & 0o777
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def _write(self, users: List[Dict[str, Any]]) -> bool:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".users-", suffix=".json", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"users": users}, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp 0600-as fájlt ad, az eredeti jogosultság marad
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
            return True
        except OSError as e:
            logger.error(f"users_write_failed path={self.path} err={e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False


class SessionRecord:
    def __init__(self, user_id: str, role: str, name: str, created_at: datetime, ttl: timedelta):
        self.user_id = user_id
        self.role = role
        self.name = name
        self.created_at = created_at
        self.expires_at = created_at + ttl

    def is_expired(self, at: datetime) -> bool:
        return at >= self.expires_at

    def to_public(self):
        return {
            "name": self.name,
            "employeeId": self.user_id,
            "role": self.role,
        }


# Szerver oldali munkamenetek; a cookie csak a tokent viszi
class SessionStore:
    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = now):
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.RLock()
        self._sessions: Dict[str, SessionRecord] = {}

    def create(self, user_id: str, role: str, name: str) -> str:
        token = secrets.token_urlsafe(32)
        record = SessionRecord(user_id, role, name, self._clock(), self.ttl)
        with self._lock:
            self._sessions[token] = record
        return token

    # Lejárt munkamenetet nem ad vissza, de nem is töröl
    def get(self, token: Optional[str]) -> Optional[SessionRecord]:
        if not token:
            return None
        with self._lock:
            record = self._sessions.get(token)
        if record is None or record.is_expired(self._clock()):
            return None
        return record

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        at = self._clock()
        with self._lock:
            expired = [t for t, r in self._sessions.items() if r.is_expired(at)]
            for t in expired:
                self._sessions.pop(t, None)
        return len(expired)

    def __len__(self):
        with self._lock:
            return len(self._sessions)
