"""Quotation routes."""
from flask import render_template, redirect, url_for, flash, request, session, current_app
from sqlalchemy.exc import SQLAlchemyError

from cotizaciones.blueprints.quotations import quotations_bp
from cotizaciones.exceptions import CotizacionError, ValidationError
from cotizaciones.forms import QuotationRequestForm
from cotizaciones.services import PriceList, QuotationService, TokenService

SAVE_FAILED = 'No se pudo guardar la cotización. Intenta nuevamente.'


@quotations_bp.route('/', methods=['GET'])
def form():
    token = TokenService(session).issue()
    return render_template(
        'quotations/form.html',
        form=QuotationRequestForm(),
        csrf_token=token,
        products=PriceList.from_config().products,
    )


@quotations_bp.route('/procesar', methods=['POST'])
def submit():
    # Raises SecurityError; the token is gone from the session either way.
    TokenService(session).consume(request.form.get('csrf_token'))

    try:
        form = QuotationRequestForm()
        if not form.validate():
            raise ValidationError(form.first_error())
        selection = QuotationService.build_selection(
            request.form.getlist('productos[]'),
            request.form.getlist('cantidad[]'),
        )
        QuotationService.create_quotation(
            customer_name=form.nombre.data,
            city=form.ciudad.data,
            address=form.direccion.data,
            phone=form.celular.data,
            selection=selection,
        )
    except ValidationError as e:
        current_app.logger.warning('Quotation rejected: %s', e.message)
        return render_template('quotations/_error.html', message=e.message), e.status_code
    except CotizacionError as e:
        current_app.logger.exception('Error saving quotation')
        return render_template('quotations/_error.html', message=e.message), e.status_code
    except SQLAlchemyError:
        current_app.logger.exception('Error saving quotation')
        return render_template('quotations/_error.html', message=SAVE_FAILED), 500

    flash('Cotización guardada exitosamente.', 'success')
    return redirect(url_for('quotations.summary'))


@quotations_bp.route('/vista', methods=['GET'])
def summary():
    # NotFoundError propagates to the registered error handler.
    result = QuotationService.latest_summary(PriceList.from_config())
    return render_template(
        'quotations/summary.html',
        quotation=result.quotation,
        lines=result.lines,
        grand_total=result.grand_total,
    )
