"""Flask application factory."""
import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy.exc import OperationalError

from config import config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_name=None):
    """Create and configure the Flask application.

    Raises ConfigError when no database URI is configured and the .env
    credentials file is missing or incomplete; no app is returned then.
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__, template_folder='templates')
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        from cotizaciones.database import database_uri_from_env
        app.config['SQLALCHEMY_DATABASE_URI'] = database_uri_from_env(app.config['ENV_FILE'])

    db.init_app(app)
    migrate.init_app(app, db)

    # Register blueprints
    from cotizaciones.blueprints.quotations import quotations_bp
    app.register_blueprint(quotations_bp, url_prefix='/')

    # Error handlers
    from cotizaciones.blueprints.errors import register_error_handlers
    register_error_handlers(app)

    from cotizaciones.utils.formatters import money
    app.jinja_env.filters['money'] = money

    @app.context_processor
    def inject_globals():
        return {'currency_symbol': app.config['CURRENCY_SYMBOL']}

    with app.app_context():
        from cotizaciones import models  # noqa: F401
        try:
            db.create_all()
        except Exception as e:
            if "already exists" in str(e).lower():
                pass  # Table created by another worker
            elif isinstance(e, OperationalError):
                # Outages fail individual requests, not startup.
                app.logger.error("Database unavailable at startup; tables not created: %s", e)
            else:
                raise

    return app
