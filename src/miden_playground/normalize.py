# normalize.py
# Form text → engine arguments.
#
# Pure functions, no state. sanitize_digit_field() runs on every keystroke;
# build_args() runs once per submission.

import re

from miden_playground.errors import InvalidNumericInputError
from miden_playground.models import ExecutionArgs, FormState

MAX_NOTE_INPUTS = 4

# ASCII only; str.isdigit() and \d would accept other scripts' digits.
_DIGITS = re.compile(r"[0-9]*")


def sanitize_digit_field(raw: str) -> str:
    """Return `raw` if it is all decimal digits (or empty), otherwise "0"."""
    if _DIGITS.fullmatch(raw):
        return raw
    return "0"


def parse_unsigned(raw: str, field: str) -> int | None:
    """
    Parse a digit string into an arbitrary-precision unsigned integer.

    Blank input means the value is absent and returns None.
    Raises InvalidNumericInputError for anything else that is not digits.
    """
    value = raw.strip()
    if not value:
        return None
    if not _DIGITS.fullmatch(value):
        raise InvalidNumericInputError(field, raw)
    return int(value)


def build_args(form: FormState) -> ExecutionArgs:
    """
    Build the engine argument set from the current form.

    Empty note-input slots are dropped, not zero-filled, and the remainder
    is capped at MAX_NOTE_INPUTS in original order.
    """
    note_inputs: list[int] = []
    for index, raw in enumerate(form.note_inputs):
        value = parse_unsigned(raw, f"note input {index + 1}")
        if value is not None:
            note_inputs.append(value)

    return ExecutionArgs(
        account_code=form.account_code,
        note_script=form.note_script,
        note_inputs=tuple(note_inputs[:MAX_NOTE_INPUTS]),
        transaction_script=form.transaction_script,
        asset_amount=parse_unsigned(form.asset_amount, "asset amount"),
        wallet_enabled=form.wallet_enabled,
        auth_enabled=form.auth_enabled,
    )
