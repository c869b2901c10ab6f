# session.py
# Single mutable aggregate for one playground session.
#
# Write discipline:
#   form: presentation layer, through the setters below only
#   runtime: RuntimeHandle
#   outcome: ExecutionInvoker
#   status, last_status: ExecutionInvoker

import logging

from miden_playground import defaults
from miden_playground.models import (
    ExecutionStatus,
    FormState,
    OutcomeState,
    RuntimeState,
)
from miden_playground.normalize import sanitize_digit_field

logger = logging.getLogger(__name__)


def default_form() -> FormState:
    return FormState(
        note_script=defaults.NOTE_SCRIPT,
        account_code=defaults.ACCOUNT_CODE,
        transaction_script=defaults.TRANSACTION_SCRIPT,
    )


class SessionState:
    """
    Explicit state container passed by reference to the orchestration layer.

    The presentation layer reads everything freely but mutates the form only
    through the set_* methods.
    """

    def __init__(self, form: FormState | None = None) -> None:
        self.form = form if form is not None else default_form()
        self.runtime = RuntimeState()
        self.outcome = OutcomeState()
        self.status = ExecutionStatus.IDLE
        self.last_status: ExecutionStatus | None = None

    @property
    def busy(self) -> bool:
        return self.status is ExecutionStatus.RUNNING

    # ------------------------------------------------------------------
    # Form setters
    # ------------------------------------------------------------------

    def set_note_script(self, text: str) -> None:
        self.form.note_script = text

    def set_account_code(self, text: str) -> None:
        self.form.account_code = text

    def set_transaction_script(self, text: str) -> None:
        self.form.transaction_script = text

    def set_note_input(self, index: int, value: str) -> None:
        if index < 0 or index >= len(self.form.note_inputs):
            raise IndexError(f"Note input slot {index + 1} does not exist.")
        self.form.note_inputs[index] = sanitize_digit_field(value)

    def set_asset_amount(self, value: str) -> None:
        self.form.asset_amount = sanitize_digit_field(value)

    def set_wallet_enabled(self, enabled: bool) -> None:
        self.form.wallet_enabled = enabled

    def set_auth_enabled(self, enabled: bool) -> None:
        self.form.auth_enabled = enabled

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------

    def reset(self) -> bool:
        """
        Replace form, runtime and outcome with fresh defaults.

        Refused while a submission is running: the engine call cannot be
        cancelled and would otherwise write into the new session.
        """
        if self.busy:
            logger.warning("Reset refused: a submission is still running.")
            return False
        self.form = default_form()
        self.runtime = RuntimeState()
        self.outcome = OutcomeState()
        self.status = ExecutionStatus.IDLE
        self.last_status = None
        return True
