"""Form defaults and required-field validation.

These sit beside the encoder, not inside it: the encoder accepts whatever
partial state a form holds, and submission code calls validate_required
before it encodes anything.
"""

from collections.abc import Mapping
from typing import Any

from jobwire.types.schema import FieldKind, JobSchema

_KIND_DEFAULTS: Mapping[FieldKind, Any] = {
    FieldKind.BOOLEAN: False,
    FieldKind.NUMBER: 0,
}


def build_defaults(job: JobSchema) -> dict[str, Any]:
    """Initial form values for every field a form renders.

    Internal fields are left out; see with_internal_defaults.

    @param job: The job schema
    @return: Form values keyed by field name
    """

    defaults: dict[str, Any] = {}

    for fld in job.form_fields:
        if fld.default_value is not None:
            defaults[fld.name] = fld.default_value
        else:
            defaults[fld.name] = _KIND_DEFAULTS.get(fld.kind, "")

    return defaults


def with_internal_defaults(job: JobSchema, values: Mapping[str, Any]) -> dict[str, Any]:
    """Fill in internal fields the form never showed.

    @param job: The job schema
    @param values: The submitted form values
    @return: A copy of values with every absent internal field set to its default
    """

    merged = dict(values)

    for fld in job.fields:
        if fld.internal and fld.name not in merged:
            merged[fld.name] = fld.default_value if fld.default_value is not None else ""

    return merged


def validate_required(job: JobSchema, values: Mapping[str, Any]) -> dict[str, str]:
    """Check that every required, user-facing field has a value.

    @param job: The job schema
    @param values: The form values
    @return: An error message per missing field; empty when the form is complete
    """

    errors: dict[str, str] = {}

    for fld in job.form_fields:
        if not fld.required:
            continue

        value = values.get(fld.name)
        if value is None or value == "":
            errors[fld.name] = f"{fld.label} is required"

    return errors
