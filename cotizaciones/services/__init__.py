"""Business logic services."""
from cotizaciones.services.catalog_service import PriceList
from cotizaciones.services.quotation_service import QuotationService
from cotizaciones.services.token_service import TokenService

__all__ = [
    'PriceList',
    'QuotationService',
    'TokenService',
]
