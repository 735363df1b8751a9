"""Database URI resolution from the .env credentials file."""
import os

from dotenv import dotenv_values
from sqlalchemy.engine import URL

from cotizaciones.exceptions import ConfigError

REQUIRED_KEYS = ('DB_HOST', 'DB_USER', 'DB_PASS', 'DB_NAME')


def database_uri_from_env(env_file):
    """Build a MySQL URI from the DB_* entries of ``env_file``.

    Raises ConfigError if the file is missing or any key is absent.
    """
    if not env_file or not os.path.isfile(env_file):
        raise ConfigError('No se encontró el archivo de configuración (.env).')
    values = dotenv_values(env_file)
    if any(values.get(key) is None for key in REQUIRED_KEYS):
        raise ConfigError('Configuración de base de datos incompleta en .env.')
    url = URL.create(
        'mysql+pymysql',
        username=values['DB_USER'],
        password=values['DB_PASS'],
        host=values['DB_HOST'],
        database=values['DB_NAME'],
        query={'charset': 'utf8mb4'},
    )
    return url.render_as_string(hide_password=False)
