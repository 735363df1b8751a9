"""Application exceptions.

Every error carries a user-facing ``message`` that is safe to show (it is
still escaped at render time) and the HTTP status it maps to. Internal
detail belongs in the log, never in ``message``.
"""


class CotizacionError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message='Ocurrió un error interno.', status_code=500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigError(CotizacionError):
    """Database configuration missing or incomplete. Fatal at startup."""
    def __init__(self, message='Configuración de base de datos inválida.'):
        super().__init__(message, 500)


class StorageConnectionError(CotizacionError):
    """Database unreachable."""
    def __init__(self, message='Error de conexión. Contacte al administrador.'):
        super().__init__(message, 503)


class SecurityError(CotizacionError):
    """Anti-forgery token missing or mismatched."""
    def __init__(self, message='CSRF token inválido. Recarga la página e intenta nuevamente.'):
        super().__init__(message, 403)


class ValidationError(CotizacionError):
    """Submitted data rejected before persistence."""
    def __init__(self, message):
        super().__init__(message, 400)


class NotFoundError(CotizacionError):
    """No quotation available to display."""
    def __init__(self, message='No hay cotizaciones registradas.'):
        super().__init__(message, 404)
