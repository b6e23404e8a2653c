"""Comma-separated number parsing for the transaction form.

The grammar is deliberately narrower than ``float()``: an optional sign
followed by digits with an optional fractional part, or a bare fractional
part. Exponents, ``inf``/``nan`` spellings, underscores and non-ASCII digits
are rejected even though Python's float parser accepts them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Tuple

EMPTY_INPUT_MESSAGE = "Please enter some values"
NO_TOKENS_MESSAGE = "Please enter valid comma-separated values"

# Accepts "5", "-12", "3.14", "5.", ".5"; rejects "1e3", "3.14.15", "+", ".".
NUMBER_PATTERN = re.compile(r"[+-]?(([0-9]+(\.[0-9]*)?)|(\.[0-9]+))")
_NON_FINITE_LITERALS = frozenset({"infinity", "nan"})


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one raw input string.

    ``numbers`` always holds the tokens that parsed, in input order, even when
    other tokens failed and ``is_valid`` is False.
    """

    is_valid: bool
    errors: Tuple[str, ...] = ()
    numbers: Tuple[float, ...] = ()


EMPTY_RESULT = ValidationResult(is_valid=True)


def invalid_token_message(token: str, position: int) -> str:
    return f'Value "{token}" at position {position} is not a valid number'


def tokenize(raw_text: str) -> List[str]:
    """Split on commas, trim each piece and drop the empty ones."""

    return [piece.strip() for piece in raw_text.split(",") if piece.strip()]


def is_valid_number_token(token: str) -> bool:
    if token.lower() in _NON_FINITE_LITERALS:
        return False
    return NUMBER_PATTERN.fullmatch(token) is not None


def parse_comma_separated_numbers(raw_text: str) -> ValidationResult:
    """Validate ``raw_text`` and parse every well-formed token.

    All malformed tokens are reported, each with its 1-based position among
    the non-empty tokens. Never raises.
    """

    if not raw_text.strip():
        return ValidationResult(is_valid=False, errors=(EMPTY_INPUT_MESSAGE,))

    tokens = tokenize(raw_text)
    if not tokens:
        return ValidationResult(is_valid=False, errors=(NO_TOKENS_MESSAGE,))

    errors: List[str] = []
    numbers: List[float] = []
    for position, token in enumerate(tokens, start=1):
        if not is_valid_number_token(token):
            errors.append(invalid_token_message(token, position))
            continue

        value = float(token)
        # Long digit strings can still overflow to inf.
        if not math.isfinite(value):
            errors.append(invalid_token_message(token, position))
            continue
        numbers.append(value)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), numbers=tuple(numbers))
