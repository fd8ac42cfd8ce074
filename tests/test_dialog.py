import pytest

from contactbook.dialog import ValidationError, validate_contact


def test_valid_data_is_returned_in_form_order():
    assert validate_contact("Ada", "+1-555", "ada@example.com") == (
        "Ada",
        "+1-555",
        "ada@example.com",
    )


def test_empty_name_rejected():
    with pytest.raises(ValidationError) as info:
        validate_contact("", "123", "ada@example.com")
    assert str(info.value) == "Name cannot be empty."
    assert info.value.log_message == "Validation failed: Name is empty"


def test_name_checked_before_email_and_phone():
    with pytest.raises(ValidationError) as info:
        validate_contact("", "abc", "bad")
    assert str(info.value) == "Name cannot be empty."


@pytest.mark.parametrize("email", ["ada.example.com", "ada@examplecom", "", "plain"])
def test_email_needs_at_and_dot(email):
    with pytest.raises(ValidationError) as info:
        validate_contact("Ada", "123", email)
    assert str(info.value) == "Please enter a valid email address."
    assert info.value.log_message == "Validation failed: Invalid email format"


def test_email_checked_before_phone():
    with pytest.raises(ValidationError) as info:
        validate_contact("Ada", "", "nope")
    assert str(info.value) == "Please enter a valid email address."


@pytest.mark.parametrize("phone", ["", "12 34", "12a", "(12)", "1.2"])
def test_bad_phone_rejected(phone):
    with pytest.raises(ValidationError) as info:
        validate_contact("Ada", phone, "ada@example.com")
    assert str(info.value) == "Please enter a valid phone number."
    assert info.value.log_message == "Validation failed: Invalid phone format"


@pytest.mark.parametrize("phone", ["0", "+", "-", "+44-20", "0123456"])
def test_phone_digits_plus_and_dash_accepted(phone):
    assert validate_contact("Ada", phone, "ada@example.com")[1] == phone


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_contact("", "1", "a@example.com")