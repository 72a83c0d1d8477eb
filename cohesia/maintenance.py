import atexit
import logging
import threading
from .store import SessionStore

logger = logging.getLogger("cohesia")
_stop_event = threading.Event()

def sweep_expired_sessions(sessions: SessionStore) -> int:
    try:
        removed = sessions.purge_expired()
    except Exception as e:
        logger.exception(f"session_sweep_exception err={e}")
        return 0
    if removed:
        logger.info(f"session_sweep removed={removed} remaining={len(sessions)}")
    return removed

# Karbantartó loop: lejárt munkamenetek takarítása
def _maintenance_loop(sessions: SessionStore, interval: int):
    while not _stop_event.wait(interval):
        sweep_expired_sessions(sessions)

# Karbantartó thread indítása
def start_maintenance_thread(sessions: SessionStore, interval: int):
    t = threading.Thread(target=_maintenance_loop, args=(sessions, interval), name="maintenance", daemon=True)
    t.start()

    @atexit.register
    def _cleanup():
        _stop_event.set()

    return t
