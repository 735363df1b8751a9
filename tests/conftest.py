import pytest

from cotizaciones import create_app, db


@pytest.fixture
def app():
    app = create_app('testing')
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def db_ctx(app, app_ctx):
    db.create_all()
    yield
    db.session.remove()
    db.drop_all()


def fetch_token(client):
    """Render the form and return the token it placed in the session."""
    client.get('/')
    with client.session_transaction() as sess:
        return sess['csrf_token']


def quotation_payload(token, **overrides):
    data = {
        'csrf_token': token,
        'nombre': 'Ana María Pérez',
        'ciudad': 'Medellín',
        'direccion': 'Calle 10 # 43-12',
        'celular': '3001234567',
        'productos[]': ['Mouse Gamer', 'Silla Gamer'],
        'cantidad[]': ['2', '1'],
    }
    data.update(overrides)
    return data
