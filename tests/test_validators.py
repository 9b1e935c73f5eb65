import pytest

from utils.validators import IDValidator, TextValidator


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    (" 42 ", 42),
    ("0", None),
    ("-3", None),
    ("²", None),
    ("١٢", None),
    ("abc", None),
    ("", None),
    (None, None),
])
def test_parse_id(raw, expected):
    assert IDValidator.parse_id(raw) == expected


def test_text_validation():
    assert TextValidator.validate_title("1984") is True
    assert TextValidator.validate_title("   ") is False
    assert TextValidator.validate_title(None) is False
    assert TextValidator.validate_author("Orwell") is True
    assert TextValidator.validate_author("12345") is False
    assert TextValidator.validate_name("Ada") is True
    assert TextValidator.validate_name("") is False
