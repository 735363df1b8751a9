"""Read-only product catalog and price lookup."""
from decimal import Decimal
from types import MappingProxyType

from flask import current_app


class PriceList:
    """Product name -> unit price table.

    Names missing from the table price at zero. That hides catalog/data
    drift instead of failing, so every miss is logged.
    """

    def __init__(self, prices):
        self._prices = MappingProxyType(
            {name: Decimal(str(price)) for name, price in prices.items()}
        )

    @classmethod
    def from_config(cls, app=None):
        app = app or current_app
        return cls(app.config['PRICE_LIST'])

    @property
    def products(self):
        return list(self._prices)

    def __contains__(self, name):
        return name in self._prices

    def __len__(self):
        return len(self._prices)

    def unit_price(self, name):
        price = self._prices.get(name)
        if price is None:
            current_app.logger.warning('Product %r not in price list; pricing at 0', name)
            return Decimal('0')
        return price
