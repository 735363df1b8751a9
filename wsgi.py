"""WSGI entry point for Gunicorn."""
import sys

from cotizaciones import create_app
from cotizaciones.exceptions import ConfigError

try:
    app = create_app()
except ConfigError as exc:
    sys.exit('Error: {}'.format(exc.message))

if __name__ == "__main__":
    app.run()
