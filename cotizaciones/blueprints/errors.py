"""Error handlers.

User-facing text is limited to the exception's own message, rendered
through autoescaped templates. Internal detail only reaches the log.
"""
from flask import render_template, request, current_app
from sqlalchemy.exc import OperationalError

from cotizaciones.exceptions import CotizacionError, SecurityError, StorageConnectionError


def _render_error(message, status_code):
    return render_template('errors/error.html', message=message), status_code


def register_error_handlers(app):
    @app.errorhandler(SecurityError)
    def handle_security_error(error):
        current_app.logger.warning('Rejected form token from %s', request.remote_addr)
        return _render_error(error.message, error.status_code)

    @app.errorhandler(CotizacionError)
    def handle_cotizacion_error(error):
        current_app.logger.error('CotizacionError [%s]: %s', error.status_code, error.message)
        return _render_error(error.message, error.status_code)

    @app.errorhandler(OperationalError)
    def handle_operational_error(error):
        current_app.logger.exception('Database unavailable')
        unavailable = StorageConnectionError()
        return _render_error(unavailable.message, unavailable.status_code)

    @app.errorhandler(404)
    def not_found_error(error):
        return _render_error('Página no encontrada.', 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _render_error('Método no permitido.', 405)

    @app.errorhandler(500)
    def internal_error(error):
        current_app.logger.error('Unhandled exception: %s', getattr(error, 'original_exception', error))
        return _render_error('Error interno del servidor.', 500)
