"""State transitions and derived views for the transaction form.

``ProcessorState`` is an immutable snapshot. Each user action maps to one
transition function that returns a new snapshot; the sorted numbers, summary
and visible output block are recomputed from the snapshot on every render and
never stored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

from services.number_parsing import (
    EMPTY_RESULT,
    ValidationResult,
    parse_comma_separated_numbers,
    tokenize,
)

logger = logging.getLogger(__name__)


class SortOrder(Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    @property
    def label(self) -> str:
        return self.value

    def toggled(self) -> "SortOrder":
        return SortOrder.DESCENDING if self is SortOrder.ASCENDING else SortOrder.ASCENDING


class OutputView(Enum):
    NONE = "none"
    ERRORS = "errors"
    RESULTS = "results"


@dataclass(frozen=True)
class ProcessorState:
    raw_input: str = ""
    result: ValidationResult = EMPTY_RESULT
    has_processed: bool = False
    sort_order: SortOrder = SortOrder.ASCENDING


@dataclass(frozen=True)
class ResultsSummary:
    """Headline numbers shown under the sorted results."""

    total: int
    order_label: str
    minimum: float
    maximum: float


def initial_state() -> ProcessorState:
    return ProcessorState()


def can_process(state: ProcessorState) -> bool:
    return bool(state.raw_input.strip())


def can_reset(state: ProcessorState) -> bool:
    return state.has_processed


def output_view(state: ProcessorState) -> OutputView:
    """Pick the block rendered below the form.

    Errors hide the results even when some tokens parsed.
    """

    if not state.has_processed:
        return OutputView.NONE
    if state.result.errors:
        return OutputView.ERRORS
    if state.result.is_valid and state.result.numbers:
        return OutputView.RESULTS
    return OutputView.NONE


def can_toggle_sort(state: ProcessorState) -> bool:
    return output_view(state) is OutputView.RESULTS


def edit_input(state: ProcessorState, raw_input: str) -> ProcessorState:
    return replace(state, raw_input=raw_input)


def process(state: ProcessorState) -> ProcessorState:
    """Validate the current input and mark the form as processed."""

    if not can_process(state):
        return state

    result = parse_comma_separated_numbers(state.raw_input)
    logger.debug(
        "Processed input: %d values parsed, %d errors",
        len(result.numbers),
        len(result.errors),
    )
    return replace(state, result=result, has_processed=True)


def reset(state: ProcessorState) -> ProcessorState:
    if not can_reset(state):
        return state
    logger.debug("Resetting transaction form")
    return initial_state()


def toggle_sort(state: ProcessorState) -> ProcessorState:
    if not can_toggle_sort(state):
        return state
    new_order = state.sort_order.toggled()
    logger.debug("Sort order switched to %s", new_order.label)
    return replace(state, sort_order=new_order)


def sorted_numbers(state: ProcessorState) -> List[float]:
    """Return the parsed numbers in the selected order.

    ``sorted`` is stable in both directions, so equal values keep their input
    order. Empty whenever the last result is invalid.
    """

    result = state.result
    if not result.is_valid or not result.numbers:
        return []
    return sorted(result.numbers, reverse=state.sort_order is SortOrder.DESCENDING)


def summarize(state: ProcessorState) -> Optional[ResultsSummary]:
    if output_view(state) is not OutputView.RESULTS:
        return None
    numbers = state.result.numbers
    return ResultsSummary(
        total=len(numbers),
        order_label=state.sort_order.label,
        minimum=min(numbers),
        maximum=max(numbers),
    )


def toggle_label(state: ProcessorState) -> str:
    return f"Switch to {state.sort_order.toggled().label}"


def format_number(value: float) -> str:
    """Render a float the way a user typed it: ``5.0`` shows as ``5``."""

    # pandas hands over numpy scalars, whose repr carries the type name.
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def summary_lines(summary: ResultsSummary) -> List[Tuple[str, str]]:
    return [
        ("Total values", str(summary.total)),
        ("Order", summary.order_label),
        ("Range", f"{format_number(summary.minimum)} to {format_number(summary.maximum)}"),
    ]


def validation_details(state: ProcessorState) -> List[str]:
    """Debug lines describing the last processed input."""

    result = state.result
    numbers_text = ", ".join(format_number(value) for value in result.numbers) or "none"
    return [
        f"Raw input: {state.raw_input or '<blank>'}",
        f"Processed: {'yes' if state.has_processed else 'no'}",
        f"Tokens: {len(tokenize(state.raw_input))}",
        f"Parsed numbers: {numbers_text}",
        f"Errors: {len(result.errors)}",
        f"Sort order: {state.sort_order.label}",
    ]
