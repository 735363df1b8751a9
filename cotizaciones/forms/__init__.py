"""Flask-WTF forms."""
from cotizaciones.forms.quotation import QuotationRequestForm

__all__ = [
    'QuotationRequestForm',
]
