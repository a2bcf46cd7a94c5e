"""Event next steps — a JSON-encoded checklist stored in a text column.

The whole array is re-serialised on every change; there is no per-step row.
"""

import json
import logging

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class NextStep(BaseModel):
    text: str = Field(min_length=1)
    completed: bool = False


_steps_adapter = TypeAdapter(list[NextStep])


def parse_steps(raw: str) -> list[NextStep]:
    """Decode a serialised checklist, raising ValueError when it is malformed."""
    try:
        return _steps_adapter.validate_json(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid next steps: {e.error_count()} error(s)") from e


def load_steps(raw: str | None) -> list[NextStep] | None:
    """Decode a stored checklist; malformed values read as no checklist."""
    if not raw:
        return None
    try:
        return parse_steps(raw)
    except ValueError:
        logger.warning("Ignoring malformed next steps value: %.80s", raw)
        return None


def dump_steps(steps: list[NextStep] | list[dict] | None) -> str | None:
    if steps is None:
        return None
    items = [NextStep.model_validate(step).model_dump() for step in steps]
    return json.dumps(items)


def all_completed(steps: list[NextStep] | None) -> bool:
    """True for a non-empty checklist whose every step is done."""
    return bool(steps) and all(step.completed for step in steps)


def toggle_step(steps: list[NextStep], index: int) -> list[NextStep]:
    """Return a copy of the checklist with one step's completion flipped."""
    if index < 0 or index >= len(steps):
        raise IndexError(f"Next step {index} does not exist")
    toggled = [step.model_copy() for step in steps]
    toggled[index].completed = not toggled[index].completed
    return toggled
