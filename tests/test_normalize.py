import pytest
from pydantic import ValidationError

from miden_playground.errors import InvalidNumericInputError
from miden_playground.models import FormState
from miden_playground.normalize import (
    MAX_NOTE_INPUTS,
    build_args,
    parse_unsigned,
    sanitize_digit_field,
)

# ---------------------------------------------------------------------------
# Keystroke sanitizer
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", ["", "0", "42", "10376293541461622847", "000123"])
def test_sanitize_keeps_digit_strings(raw):
    assert sanitize_digit_field(raw) == raw


@pytest.mark.parametrize("raw", ["12a3", "-1", "1.5", " 7", "1e3", "٣"])
def test_sanitize_coerces_everything_else_to_zero(raw):
    assert sanitize_digit_field(raw) == "0"


# ---------------------------------------------------------------------------
# Unsigned parse
# ---------------------------------------------------------------------------


def test_parse_unsigned_blank_is_absent():
    assert parse_unsigned("", "asset amount") is None
    assert parse_unsigned("   ", "asset amount") is None


def test_parse_unsigned_is_arbitrary_precision():
    assert parse_unsigned("340282366920938463463374607431768211456", "x") == 2**128


def test_parse_unsigned_rejects_non_digits():
    with pytest.raises(InvalidNumericInputError, match="asset amount") as info:
        parse_unsigned("-5", "asset amount")
    assert info.value.value == "-5"


# ---------------------------------------------------------------------------
# Argument building
# ---------------------------------------------------------------------------


def test_build_args_all_empty_inputs_gives_empty_sequence(form):
    form.note_inputs = ["", "", "", ""]
    args = build_args(form)
    assert args.note_inputs == ()


def test_build_args_drops_empty_slots_in_order(form):
    form.note_inputs = ["", "7", " ", "3"]
    assert build_args(form).note_inputs == (7, 3)


def test_build_args_caps_note_inputs(form):
    form.note_inputs = ["1", "", "2", "3", "4", "5", "6"]
    args = build_args(form)
    assert len(args.note_inputs) == MAX_NOTE_INPUTS
    assert args.note_inputs == (1, 2, 3, 4)


def test_build_args_default_inputs():
    args = build_args(FormState())
    assert args.note_inputs == (10376293541461622847,)
    assert args.asset_amount is None


def test_build_args_asset_amount(form):
    form.asset_amount = "250"
    assert build_args(form).asset_amount == 250


def test_build_args_passes_text_and_toggles_through(form):
    form.wallet_enabled = False
    form.auth_enabled = True
    form.transaction_script = ""
    args = build_args(form)
    assert args.account_code == form.account_code
    assert args.note_script == form.note_script
    assert args.transaction_script == ""
    assert args.wallet_enabled is False
    assert args.auth_enabled is True


def test_build_args_rejects_injected_value(form):
    form.note_inputs = ["1", "12a3", "", ""]
    with pytest.raises(InvalidNumericInputError, match="note input 2"):
        build_args(form)


def test_execution_args_are_frozen(form):
    args = build_args(form)
    with pytest.raises(ValidationError):
        args.note_script = "mutated"
