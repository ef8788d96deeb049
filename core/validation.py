"""Form constraints a browser enforces natively before submit"""
from pydantic import ValidationError

from core.models import EmailCheck, FieldName, FormFields


def check_constraints(fields: FormFields) -> list[str]:
    """
    Return the problems that block submission, empty when the form may be sent.

    Every field is required. A non-empty email must also look like an address,
    matching what an `<input type="email">` would accept.
    """
    problems = []
    for name in FieldName:
        if not getattr(fields, name.value):
            problems.append(f"Please fill out the {name.value} field.")

    if fields.email:
        try:
            EmailCheck(email=fields.email)
        except ValidationError:
            problems.append(f"'{fields.email}' is not a valid email address.")

    return problems
