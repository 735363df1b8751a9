"""Quotation model."""
import json

from cotizaciones import db


def _decode_list(raw):
    """Stored JSON array, or an empty list if the column holds anything else."""
    try:
        value = json.loads(raw or '[]')
    except ValueError:
        return []
    return value if isinstance(value, list) else []


class Quotation(db.Model):
    __tablename__ = 'cotizaciones'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    customer_name = db.Column('nombre', db.String(200), nullable=False)
    city = db.Column('ciudad', db.String(100), nullable=False)
    address = db.Column('direccion', db.String(255), nullable=False)
    phone = db.Column('celular', db.String(10), nullable=False)
    products_json = db.Column('productos', db.Text, nullable=False, default='[]')
    quantities_json = db.Column('cantidades', db.Text, nullable=False, default='[]')
    created_at = db.Column('fecha', db.DateTime, nullable=False, server_default=db.func.now(), index=True)

    @property
    def products(self):
        return _decode_list(self.products_json)

    @property
    def quantities(self):
        return _decode_list(self.quantities_json)

    @classmethod
    def latest(cls):
        return cls.query.order_by(cls.created_at.desc(), cls.id.desc()).first()

    def __repr__(self):
        return f'<Quotation {self.id} {self.customer_name}>'
