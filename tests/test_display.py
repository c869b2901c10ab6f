from unittest.mock import patch

from rich.console import Console

from miden_playground import display
from miden_playground.models import ExecutionResult, FormState, RuntimeState


def _recording_console() -> Console:
    return Console(record=True, width=140, color_system=None)


def test_outputs_lists_every_field(record):
    recorder = _recording_console()
    with patch.object(display, "console", recorder):
        display.outputs(ExecutionResult(**record))
    text = recorder.export_text()
    for label in display.OUTPUT_LABELS.values():
        assert label in text
    assert "65536" in text


def test_outputs_show_numeric_and_absent_values(record):
    record["account_delta_nonce"] = 7
    record["account_delta_vault"] = None
    recorder = _recording_console()
    with patch.object(display, "console", recorder):
        display.outputs(ExecutionResult(**record))
    lines = recorder.export_text().splitlines()
    assert any("Account Delta Nonce" in line and "7" in line for line in lines)
    assert any("Account Delta Vault" in line and "—" in line for line in lines)


def test_error_text_is_not_parsed_as_markup():
    recorder = _recording_console()
    with patch.object(display, "console", recorder):
        display.error("Execution failed: unexpected token [/bold] at line 3")
    assert "[/bold]" in recorder.export_text()


def test_form_and_engine_status():
    recorder = _recording_console()
    form = FormState(note_inputs=["[red]", "", "", ""], asset_amount="5")
    with patch.object(display, "console", recorder):
        display.form(form)
        display.engine_status(RuntimeState(init_error="Failed to initialize engine: no wasm"))
    text = recorder.export_text()
    assert "[red]" in text
    assert "Failed to initialize engine: no wasm" in text
