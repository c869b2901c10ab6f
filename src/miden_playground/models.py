# models.py
# Data contracts for the playground session.
# No business logic lives here, pure schema and validation.

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NOTE_INPUTS = ["10376293541461622847", "", "", ""]


class ExecutionStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FormState(BaseModel):
    """
    User-editable snapshot of the playground form.

    Digit fields are not validated here. The session setters sanitize every
    edit; anything that slips past them is caught when arguments are built.
    """

    note_script: str = ""
    account_code: str = ""
    transaction_script: str = ""
    note_inputs: list[str] = Field(default_factory=lambda: list(DEFAULT_NOTE_INPUTS))
    asset_amount: str = Field(default="", description="Optional decimal-digit string.")
    wallet_enabled: bool = True
    auth_enabled: bool = True


class RuntimeState(BaseModel):
    ready: bool = False
    init_error: str | None = Field(default=None, description="Last engine load failure.")


class ExecutionArgs(BaseModel):
    """Normalized argument set for one engine call. Never mutated."""

    model_config = ConfigDict(frozen=True)

    account_code: str
    note_script: str
    note_inputs: tuple[int, ...] = Field(default=(), max_length=4)
    transaction_script: str
    asset_amount: int | None = Field(default=None, ge=0)
    wallet_enabled: bool = True
    auth_enabled: bool = True


class ExecutionResult(BaseModel):
    """Record returned by a successful engine call. Values are opaque."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    # Engines report these as hex strings, integers or nothing at all.
    account_code_commitment: str | int | None = None
    account_delta_nonce: str | int | None = None
    account_delta_storage: str | int | None = None
    account_delta_vault: str | int | None = None
    account_hash: str | int | None = None
    account_storage_commitment: str | int | None = None
    account_vault_commitment: str | int | None = None
    cycle_count: int
    trace_length: int


class OutcomeState(BaseModel):
    """Result XOR error of the last completed submission."""

    result: ExecutionResult | None = None
    error: str | None = None
