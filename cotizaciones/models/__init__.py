"""Database models."""
from cotizaciones.models.quotation import Quotation

__all__ = [
    'Quotation',
]
