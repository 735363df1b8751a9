"""Quotation request form."""
import re

from flask import current_app
from flask_wtf import FlaskForm
from wtforms import StringField, SelectField
from wtforms.validators import DataRequired, Regexp, ValidationError

_TAG_RE = re.compile(r'<[^>]*>?')
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_NON_NUMERIC_RE = re.compile(r'[^0-9+\-]')


def strip_text(value):
    """Drop markup and control characters, then trim."""
    if value is None:
        return value
    value = _TAG_RE.sub('', value)
    value = _CONTROL_RE.sub('', value)
    return value.strip()


def numeric_only(value):
    """Keep digits and sign characters only."""
    if value is None:
        return value
    return _NON_NUMERIC_RE.sub('', value.strip())


class QuotationRequestForm(FlaskForm):
    class Meta:
        # Replaced by the single-use session token checked in the route.
        csrf = False

    nombre = StringField('Nombres y Apellidos', filters=[strip_text],
                         validators=[DataRequired(message='El nombre es obligatorio.')])
    ciudad = SelectField('Ciudad', filters=[strip_text],
                         validators=[DataRequired(message='Seleccione una ciudad.')],
                         validate_choice=False)
    direccion = StringField('Dirección', filters=[strip_text],
                            validators=[DataRequired(message='La dirección es obligatoria.')])
    celular = StringField('Celular', filters=[numeric_only],
                          validators=[Regexp(r'^\d{10}$', flags=re.ASCII,
                                             message='Número de celular inválido.')])

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.ciudad.choices = [('', 'Seleccione una ciudad')] + [
            (city, city) for city in current_app.config['CITIES']
        ]

    def validate_ciudad(self, field):
        if field.data not in current_app.config['CITIES']:
            raise ValidationError('Ciudad no válida.')

    def first_error(self):
        for field in self:
            if field.errors:
                return field.errors[0]
        return None
