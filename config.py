"""Application configuration."""
import os
from datetime import timedelta

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Database credentials (DB_HOST, DB_USER, DB_PASS, DB_NAME) are read from
    # this file unless SQLALCHEMY_DATABASE_URI is set.
    ENV_FILE = os.environ.get('ENV_FILE') or os.path.join(BASE_DIR, '.env')
    SQLALCHEMY_DATABASE_URI = None

    # Session
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # The quotation form carries its own single-use token
    WTF_CSRF_ENABLED = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Application
    CITIES = ['Bogotá', 'Medellín', 'Cali', 'Barranquilla']
    PRICE_LIST = {
        'Laptop Dell': 800000,
        'Monitor Samsung': 1200000,
        'Teclado Mecánico': 250000,
        'Mouse Gamer': 70000,
        'Impresora HP': 400000,
        'Disco SSD 1TB': 100000,
        'Memoria RAM 16GB': 385000,
        'Tarjeta Gráfica RTX 3060': 6000000,
        'Audífonos Inalámbricos': 300000,
        'Silla Gamer': 700000,
    }
    CURRENCY_SYMBOL = '$'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DATABASE_URL') or 'sqlite://'
    SERVER_NAME = 'localhost'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
