from typing import Optional

class IDValidator:
    """Parses ids typed at the prompt. Catalog ids are positive integers."""

    @staticmethod
    def parse_id(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        # int() rejects non-ASCII digits such as "²"
        if not (s.isascii() and s.isdigit()):
            return None
        value = int(s)
        return value if value > 0 else None

class TextValidator:
    """Basic checks on text typed at the prompt before it reaches the catalog."""

    @staticmethod
    def _is_present(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_present(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        # must not be digits only
        if not TextValidator._is_present(author):
            return False
        return not author.strip().isdigit()

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        if not TextValidator._is_present(name):
            return False
        return not name.strip().isdigit()
