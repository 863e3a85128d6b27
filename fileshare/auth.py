# auth.py
# Credential checks, server-side session ids and the login guard.
import logging
import threading
import uuid
from functools import wraps

from flask import current_app, redirect, session, url_for
from werkzeug.security import check_password_hash, generate_password_hash

from .errors import AuthFailure, ConflictError
from .users import UserRecord, UserStore

logger = logging.getLogger("fileshare")

SESSION_KEY = "sid"


class AuthGate:
    """
    The client session only carries an id; the set of live ids is kept here,
    so logging out revokes the id even if the client keeps its cookie.
    """

    def __init__(self, store: UserStore):
        self.store = store
        self._sessions = set()
        self._lock = threading.Lock()

    def verify_credentials(self, username: str, password: str) -> bool:
        user = self.store.find(username)
        if user is None:
            return False
        return check_password_hash(user.password_hash, password)

    def login(self, sess, username: str, password: str):
        """Start a new session in sess, or raise AuthFailure and leave it untouched."""
        if not self.verify_credentials(username, password):
            logger.info("Login failed for %r", username)
            raise AuthFailure(username)
        sid = uuid.uuid4().hex
        with self._lock:
            self._sessions.discard(sess.get(SESSION_KEY))
            self._sessions.add(sid)
        sess[SESSION_KEY] = sid
        logger.info("Login ok: %r", username)

    def register(self, username: str, password: str) -> UserRecord:
        # duplicate check before hashing, repeated under the write lock by append()
        if self.store.find(username) is not None:
            raise ConflictError(username)
        # hashed outside the store write lock
        record = UserRecord(username, generate_password_hash(password))
        if not self.store.append(record):
            raise ConflictError(username)
        logger.info("Registered user %r", username)
        return record

    def logout(self, sess):
        with self._lock:
            self._sessions.discard(sess.get(SESSION_KEY))
        sess.clear()

    def is_authenticated(self, sess) -> bool:
        sid = sess.get(SESSION_KEY)
        if not sid:
            return False
        with self._lock:
            return sid in self._sessions


def login_required(f):
    """Decorator: redirect to login if not authenticated."""
    @wraps(f)
    def deco(*a, **kw):
        if not current_app.extensions["auth_gate"].is_authenticated(session):
            return redirect(url_for("login"))
        return f(*a, **kw)
    return deco
