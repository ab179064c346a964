from typing import Optional

INVALID_USER_ID = "Invalid user id. It must be an integer."


def parse_user_id(raw: Optional[str]) -> int:
    """Turn console text into a user id. Raises ValueError with a printable message."""
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(INVALID_USER_ID) from None


class TextValidator:
    """Checks for free-text fields typed at the console."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def missing_fields(**fields: Optional[str]) -> list:
        """Names of the given fields that are blank, in argument order."""
        return [name for name, value in fields.items() if TextValidator.is_blank(value)]
