"""Language domain model."""

from enum import Enum


class Language(str, Enum):
    """UI language. Values match the suffix of the API's localized fields."""

    EN = "en"
    TC = "tc"

    def toggled(self) -> "Language":
        """Return the other supported language."""
        return Language.TC if self is Language.EN else Language.EN

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Parse a language code such as 'en' or 'tc' (case-insensitive)."""
        return cls(code.strip().lower())
