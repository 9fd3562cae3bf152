"""
Number formats for text input and output.

A NumberFormat plays the role of a locale/culture: it says which character
separates the integer and fractional parts of a number and which character
groups thousands. Parsing is locale-independent otherwise (the process-wide
``locale`` setting is never consulted).

This module is the single source of truth for the format presets.
"""

from dataclasses import dataclass
from typing import Any

from pydense.core.exceptions import ValidationError


@dataclass(frozen=True)
class NumberFormat:
    """Decimal and grouping separators used to read and write numbers."""
    name: str
    decimal_separator: str
    group_separator: str

    def __post_init__(self) -> None:
        if len(self.decimal_separator) != 1:
            raise ValidationError(
                f"decimal_separator: expected a single character, "
                f"got {self.decimal_separator!r}"
            )
        if self.group_separator == self.decimal_separator:
            raise ValidationError(
                f"group_separator: must differ from decimal_separator "
                f"({self.decimal_separator!r})"
            )

    def normalize(self, token: str) -> str:
        """
        Rewrite a token into a Python numeric literal.

        Strips whitespace, drops group separators and replaces the decimal
        separator with '.'.
        """
        text = token.strip()
        if self.group_separator:
            text = text.replace(self.group_separator, '')
        if self.decimal_separator != '.':
            text = text.replace(self.decimal_separator, '.')
        return text


# Culture-independent format
INVARIANT = NumberFormat(
    name='invariant',
    decimal_separator='.',
    group_separator=',',
)

EN_US = NumberFormat(
    name='en-US',
    decimal_separator='.',
    group_separator=',',
)

DE_DE = NumberFormat(
    name='de-DE',
    decimal_separator=',',
    group_separator='.',
)

# French uses a narrow no-break space for grouping
FR_FR = NumberFormat(
    name='fr-FR',
    decimal_separator=',',
    group_separator='\u202f',
)

RU_RU = NumberFormat(
    name='ru-RU',
    decimal_separator=',',
    group_separator='\u00a0',
)

_PRESETS = {fmt.name.lower(): fmt for fmt in (INVARIANT, EN_US, DE_DE, FR_FR, RU_RU)}


def get_format(fmt: 'NumberFormat | str | None') -> NumberFormat:
    """
    Resolve a format argument.

    Args:
        fmt: A NumberFormat, a preset name (case-insensitive) or None
             for the invariant format

    Returns:
        NumberFormat

    Raises:
        ValidationError: If the preset name is unknown
    """
    if fmt is None:
        return INVARIANT
    if isinstance(fmt, NumberFormat):
        return fmt
    if isinstance(fmt, str):
        try:
            return _PRESETS[fmt.lower()]
        except KeyError:
            known = ", ".join(sorted(_PRESETS))
            raise ValidationError(
                f"fmt: unknown number format {fmt!r} (known: {known})"
            ) from None
    raise ValidationError(
        f"fmt: expected NumberFormat, str or None, got {type(fmt).__name__}"
    )


def format_scalar(value: Any, fmt: NumberFormat = INVARIANT) -> str:
    """Render a scalar with the format's decimal separator (no grouping)."""
    text = str(value)
    if fmt.decimal_separator != '.':
        text = text.replace('.', fmt.decimal_separator)
    return text


__all__ = [
    'NumberFormat',
    'INVARIANT',
    'EN_US',
    'DE_DE',
    'FR_FR',
    'RU_RU',
    'get_format',
    'format_scalar',
]
