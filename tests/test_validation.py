from core.models import FormFields
from core.validation import check_constraints


def test_complete_form_passes():
    fields = FormFields(username="bob", email="bob@x.com", password="secret")
    assert check_constraints(fields) == []


def test_each_empty_field_is_reported():
    problems = check_constraints(FormFields())
    assert len(problems) == 3
    for name in ("username", "email", "password"):
        assert any(name in problem for problem in problems)


def test_malformed_email_is_reported():
    fields = FormFields(username="bob", email="not-an-email", password="secret")
    problems = check_constraints(fields)
    assert len(problems) == 1
    assert "not-an-email" in problems[0]


def test_dotless_and_special_use_domains_are_accepted():
    for email in ("bob@localhost", "bob@intranet", "bob@site.local", "bob@x.test"):
        fields = FormFields(username="bob", email=email, password="secret")
        assert check_constraints(fields) == [], email


def test_display_name_form_is_rejected():
    fields = FormFields(username="bob", email="Bob <bob@x.com>", password="secret")
    problems = check_constraints(fields)
    assert problems == ["'Bob <bob@x.com>' is not a valid email address."]


def test_address_without_local_part_is_rejected():
    fields = FormFields(username="bob", email="@x.com", password="secret")
    assert len(check_constraints(fields)) == 1
