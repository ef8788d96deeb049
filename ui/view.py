"""What the register form shows for a given session"""
from dataclasses import dataclass

from core.models import CONFIRMATION_MESSAGE, FieldName
from core.session import FormSession

SUBMIT_LABEL = "Register"

# name -> (label, input type)
INPUTS = {
    FieldName.USERNAME: ("Username", "text"),
    FieldName.EMAIL: ("Email", "email"),
    FieldName.PASSWORD: ("Password", "password"),
}


@dataclass(frozen=True)
class InputSpec:
    name: str
    label: str
    input_type: str
    placeholder: str
    value: str
    required: bool = True


@dataclass(frozen=True)
class FormView:
    inputs: tuple[InputSpec, ...]
    submit_label: str = SUBMIT_LABEL


@dataclass(frozen=True)
class ConfirmationView:
    message: str = CONFIRMATION_MESSAGE


def render(session: FormSession) -> FormView | ConfirmationView:
    """Confirmation once registered, otherwise the editable form"""
    if session.registered:
        return ConfirmationView()

    fields = session.fields
    return FormView(
        inputs=tuple(
            InputSpec(
                name=name.value,
                label=label,
                input_type=input_type,
                placeholder=name.value,
                value=getattr(fields, name.value),
            )
            for name, (label, input_type) in INPUTS.items()
        )
    )
