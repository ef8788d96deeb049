from core.models import CONFIRMATION_MESSAGE
from core.session import FormSession
from ui.view import ConfirmationView, FormView, render


def test_initial_view_is_empty_form():
    view = render(FormSession())

    assert isinstance(view, FormView)
    assert view.submit_label == "Register"
    assert [spec.name for spec in view.inputs] == ["username", "email", "password"]
    assert [spec.label for spec in view.inputs] == ["Username", "Email", "Password"]
    assert [spec.input_type for spec in view.inputs] == ["text", "email", "password"]
    for spec in view.inputs:
        assert spec.value == ""
        assert spec.placeholder == spec.name
        assert spec.required


def test_form_view_reflects_field_values():
    session = FormSession()
    session.update_field("email", "a@b.com")

    values = {spec.name: spec.value for spec in render(session).inputs}

    assert values == {"username": "", "email": "a@b.com", "password": ""}


def test_registered_view_is_only_confirmation():
    session = FormSession()
    session.update_field("username", "bob")
    session.submit()

    view = render(session)

    assert view == ConfirmationView(message=CONFIRMATION_MESSAGE)
    assert view.message == "Registration successful! Welcome aboard!"


def test_confirmation_does_not_depend_on_fields():
    empty = FormSession()
    empty.submit()
    filled = FormSession()
    filled.update_field("username", "alice")
    filled.submit()

    assert render(empty) == render(filled)
