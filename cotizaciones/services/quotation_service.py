"""Quotation persistence and summary computation."""
import json
from collections import namedtuple
from decimal import Decimal

from flask import current_app
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from cotizaciones import db
from cotizaciones.exceptions import NotFoundError, StorageConnectionError, ValidationError
from cotizaciones.forms.quotation import strip_text
from cotizaciones.models import Quotation

INVALID_SELECTION = 'Los productos y cantidades no son válidos.'

LineSelection = namedtuple('LineSelection', ['products', 'quantities'])
SummaryLine = namedtuple('SummaryLine', ['product', 'quantity', 'unit_price', 'line_total'])
QuotationSummary = namedtuple('QuotationSummary', ['quotation', 'lines', 'grand_total'])


def _to_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class QuotationService:
    @staticmethod
    def build_selection(products, quantities):
        """Validate the parallel product/quantity lists from the form.

        Both must be lists of equal length; each product a non-empty name and
        each quantity a positive integer. Quantities are kept as strings.
        """
        if not isinstance(products, (list, tuple)) or not isinstance(quantities, (list, tuple)):
            raise ValidationError(INVALID_SELECTION)
        if len(products) != len(quantities):
            raise ValidationError(INVALID_SELECTION)
        clean_products = []
        clean_quantities = []
        for name, qty in zip(products, quantities):
            name = strip_text(name) if isinstance(name, str) else None
            try:
                count = int(qty)
            except (TypeError, ValueError):
                raise ValidationError(INVALID_SELECTION) from None
            if not name or count < 1:
                raise ValidationError(INVALID_SELECTION)
            clean_products.append(name)
            clean_quantities.append(str(count))
        return LineSelection(clean_products, clean_quantities)

    @staticmethod
    def create_quotation(customer_name, city, address, phone, selection):
        quo = Quotation(
            customer_name=customer_name,
            city=city,
            address=address,
            phone=phone,
            products_json=json.dumps(selection.products, ensure_ascii=False),
            quantities_json=json.dumps(selection.quantities, ensure_ascii=False),
        )
        db.session.add(quo)
        try:
            db.session.commit()
        except OperationalError as exc:
            db.session.rollback()
            raise StorageConnectionError() from exc
        except SQLAlchemyError:
            db.session.rollback()
            raise
        current_app.logger.info('Quotation %s stored (%d lines)', quo.id, len(selection.products))
        return quo

    @staticmethod
    def summarize(quotation, price_list):
        lines = []
        grand_total = Decimal('0')
        quantities = quotation.quantities
        for index, product in enumerate(quotation.products):
            qty = _to_int(quantities[index]) if index < len(quantities) else 0
            unit_price = price_list.unit_price(product)
            line_total = qty * unit_price
            grand_total += line_total
            lines.append(SummaryLine(product, qty, unit_price, line_total))
        return QuotationSummary(quotation, lines, grand_total)

    @staticmethod
    def latest_summary(price_list):
        quotation = Quotation.latest()
        if quotation is None:
            raise NotFoundError()
        return QuotationService.summarize(quotation, price_list)
