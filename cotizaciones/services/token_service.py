"""Single-use anti-forgery tokens bound to a session."""
import hmac
import secrets

from cotizaciones.exceptions import SecurityError

SESSION_KEY = 'csrf_token'
TOKEN_BYTES = 32


class TokenService:
    """Issues and consumes the session's form token.

    ``store`` is any mutable mapping scoped to one user session, usually
    ``flask.session``. A token lives from the first ``issue`` until the next
    ``consume``, which always removes it, whether or not it matched.
    """

    def __init__(self, store):
        self.store = store

    def issue(self):
        token = self.store.get(SESSION_KEY)
        if not token:
            token = secrets.token_hex(TOKEN_BYTES)
            self.store[SESSION_KEY] = token
        return token

    def consume(self, submitted):
        expected = self.store.pop(SESSION_KEY, None)
        if not expected or not submitted:
            raise SecurityError()
        if not hmac.compare_digest(str(expected).encode('utf-8'), str(submitted).encode('utf-8')):
            raise SecurityError()
