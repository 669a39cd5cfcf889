"""
Payload gate for mutating routes.

validate_payload() binds a nested-prefix form to the submitted data and
either returns the valid form or raises ValidationError (400) carrying the
structured field errors plus their comma-joined text.
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import ValidationError


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f'"{self.field}" {self.message}'


def field_errors(form) -> list[FieldError]:
    """Flatten a bound form's errors into `prefix.field` entries, in field order."""
    out: list[FieldError] = []
    for name, errors in form.errors.items():
        field = f"{form.prefix}.{name}" if name != "__all__" else form.prefix
        for message in errors:
            out.append(FieldError(field, message))
    return out


def _has_payload(data, prefix: str) -> bool:
    marker = f"{prefix}["
    return any(key.startswith(marker) for key in (data or {}))


def validate_payload(form_class, data, instance=None):
    """
    Validate `data` against `form_class`.
    :param form_class: a NestedPrefixMixin ModelForm (CampgroundForm, ReviewForm)
    :param data: QueryDict / mapping of submitted fields
    :param instance: existing record for edit submissions
    :return: the bound, valid form
    :raises ValidationError: when the payload is missing or any field fails
    """
    prefix = form_class.prefix
    if not _has_payload(data, prefix):
        missing = FieldError(prefix, "is required")
        raise ValidationError(str(missing), field_errors=[missing])

    form = form_class(data, instance=instance)
    if not form.is_valid():
        errors = field_errors(form)
        raise ValidationError(",".join(str(e) for e in errors), field_errors=errors)
    return form
