# invoker.py
# Submission state machine.
#
# The invoker is the kernel of the playground. The engine is a passive
# responder; this class owns sequencing, outcome classification and the
# at-most-one-in-flight rule.
#
# Control flow per submit():
#   busy? → drop
#   → clear outcome → (re)initialize per policy → ensure ready
#   → build args → engine.execute() → result XOR error → idle
#
# All terminal output lives in display.py, no formatting here.

import logging
from typing import Any

from pydantic import ValidationError

from miden_playground.config import InitPolicy
from miden_playground.errors import EngineExecutionError, PlaygroundError
from miden_playground.models import (
    ExecutionArgs,
    ExecutionResult,
    ExecutionStatus,
    OutcomeState,
)
from miden_playground.normalize import build_args
from miden_playground.runtime import RuntimeHandle, resolve
from miden_playground.session import SessionState

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def render_error(exc: BaseException) -> str:
    """User-facing message for a failed submission."""
    if isinstance(exc, PlaygroundError) and not isinstance(exc, EngineExecutionError):
        return str(exc)
    return f"Execution failed: {str(exc) or type(exc).__name__}"


def _classify(raw: Any) -> ExecutionResult:
    """
    Turn whatever the engine returned into an ExecutionResult.

    A returned exception or bare string is the engine reporting failure
    without raising.
    """
    if isinstance(raw, BaseException):
        raise EngineExecutionError(str(raw) or type(raw).__name__) from raw
    if isinstance(raw, str):
        raise EngineExecutionError(raw)
    try:
        return ExecutionResult.model_validate(raw)
    except ValidationError as exc:
        logger.debug("Engine result failed validation: %s", exc)
        raise EngineExecutionError(
            f"Engine returned an unexpected result ({_summarize(exc)})"
        ) from exc


def _summarize(exc: ValidationError) -> str:
    """Short field-level summary, e.g. "missing: trace_length; invalid: cycle_count"."""
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "record"
        bucket = missing if error["type"] == "missing" else invalid
        if name not in bucket:
            bucket.append(name)
    parts = []
    if missing:
        parts.append("missing: " + ", ".join(missing))
    if invalid:
        parts.append("invalid: " + ", ".join(invalid))
    return "; ".join(parts)


def _log_args(args: ExecutionArgs) -> None:
    logger.debug("Account code: %s", args.account_code)
    logger.debug("Note script: %s", args.note_script)
    logger.debug("Note inputs: %s", list(args.note_inputs))
    logger.debug("Transaction script: %s", args.transaction_script)
    logger.debug("Asset amount: %s", args.asset_amount)
    logger.debug("Wallet enabled: %s", args.wallet_enabled)
    logger.debug("Auth enabled: %s", args.auth_enabled)


# ---------------------------------------------------------------------------
# ExecutionInvoker
# ---------------------------------------------------------------------------


class ExecutionInvoker:
    """
    Runs one submission at a time against the engine behind `runtime`.

    Example:
        session = SessionState()
        runtime = RuntimeHandle(ModuleEngine("my_engine"), session)
        await runtime.initialize()
        invoker = ExecutionInvoker(session, runtime)
        await invoker.submit()
        print(session.outcome)
    """

    def __init__(
        self,
        session: SessionState,
        runtime: RuntimeHandle,
        init_policy: InitPolicy = InitPolicy.ONCE,
    ) -> None:
        self._session = session
        self._runtime = runtime
        self._init_policy = init_policy

    async def _execute(self, args: ExecutionArgs) -> ExecutionResult:
        raw = await resolve(
            self._runtime.engine.execute(
                args.account_code,
                args.note_script,
                list(args.note_inputs),
                args.transaction_script,
                args.asset_amount,
                args.wallet_enabled,
                args.auth_enabled,
            )
        )
        return _classify(raw)

    async def submit(self) -> bool:
        """
        Run the submit step once.

        Returns False without touching the outcome if a submission is
        already running. Never raises for engine or input failures: they
        land in session.outcome.error.
        """
        session = self._session
        # Check and flip before the first await so a concurrent submit()
        # on the same loop always sees RUNNING.
        if session.busy:
            logger.warning("Submission ignored: another submission is running.")
            return False
        session.status = ExecutionStatus.RUNNING
        session.outcome = OutcomeState()

        try:
            if self._init_policy is InitPolicy.PER_CALL:
                await self._runtime.initialize(force=True)
            self._runtime.ensure_ready()

            args = build_args(session.form)
            _log_args(args)

            result = await self._execute(args)
        except Exception as exc:
            message = render_error(exc)
            logger.warning("Submission failed: %s", message)
            session.outcome = OutcomeState(error=message)
            session.last_status = ExecutionStatus.FAILED
        else:
            logger.info("Submission succeeded: cycle_count=%s", result.cycle_count)
            logger.debug("Execution result: %s", result.model_dump())
            session.outcome = OutcomeState(result=result)
            session.last_status = ExecutionStatus.SUCCEEDED
        finally:
            session.status = ExecutionStatus.IDLE

        return True
