import pytest

from utils.validators import INVALID_USER_ID, TextValidator, parse_user_id


@pytest.mark.parametrize("raw,expected", [("1", 1), (" 42 ", 42), ("-3", -3)])
def test_parse_user_id(raw, expected):
    assert parse_user_id(raw) == expected

@pytest.mark.parametrize("raw", ["", "   ", "abc", "1.5", None])
def test_parse_user_id_rejects_non_integers(raw):
    with pytest.raises(ValueError, match=INVALID_USER_ID):
        parse_user_id(raw)

def test_text_validator():
    assert TextValidator.is_blank(None)
    assert TextValidator.is_blank("  ")
    assert not TextValidator.is_blank("Dune")
    assert TextValidator.missing_fields(isbn="1", title=" ", author=None) == ["title", "author"]
