# console.py
# Interactive front end. Reads commands, routes edits through the session
# setters and submissions through the invoker. Rendering is delegated to
# display.py.

import logging
import shlex
from pathlib import Path

from rich.prompt import Prompt

from miden_playground import defaults, display
from miden_playground.config import InitPolicy, PlaygroundConfig
from miden_playground.errors import EngineInitError
from miden_playground.invoker import ExecutionInvoker
from miden_playground.runtime import Engine, ModuleEngine, RuntimeHandle
from miden_playground.session import SessionState

logger = logging.getLogger(__name__)

_TOGGLES = {"on": True, "off": False, "true": True, "false": False, "1": True, "0": False}
_REFERENCES = {
    "wallet": ("Basic Wallet", defaults.BASIC_WALLET),
    "auth": ("Basic Authentication", defaults.BASIC_AUTHENTICATION),
}


class CommandError(Exception):
    """Raised for a malformed command line. Shown to the user, never fatal."""


class PlaygroundConsole:
    def __init__(self, config: PlaygroundConfig, engine: Engine | None = None) -> None:
        self.config = config
        self.session = SessionState()
        self.runtime = RuntimeHandle(engine or ModuleEngine(config.engine), self.session)
        self.invoker = ExecutionInvoker(self.session, self.runtime, config.init_policy)
        self._script_setters = {
            "note": self.session.set_note_script,
            "account": self.session.set_account_code,
            "tx": self.session.set_transaction_script,
        }

    # ------------------------------------------------------------------
    # Engine lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Load the engine up front, unless it is loaded per submission."""
        if self.config.init_policy is InitPolicy.PER_CALL:
            return
        display.engine_loading()
        try:
            await self.runtime.initialize()
        except EngineInitError:
            logger.debug("Engine load failed at startup.", exc_info=True)
        display.engine_status(self.session.runtime)

    async def reload(self) -> None:
        if not self.session.reset():
            display.reload_refused()
            return
        await self.start()

    async def execute(self) -> None:
        if self.session.busy:
            display.busy()
            return
        await self.invoker.submit()
        outcome = self.session.outcome
        if outcome.result is not None:
            display.outputs(outcome.result)
        elif outcome.error is not None:
            display.error(outcome.error)

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    def _set_note_input(self, args: list[str]) -> None:
        if not args:
            raise CommandError("Usage: note <1-4> <value>")
        try:
            slot = int(args[0])
        except ValueError as exc:
            raise CommandError(f"Note input slot must be a number, got {args[0]!r}.") from exc
        value = args[1] if len(args) > 1 else ""
        try:
            self.session.set_note_input(slot - 1, value)
        except IndexError as exc:
            raise CommandError(str(exc)) from exc
        display.field_updated(f"note input {slot}", self.session.form.note_inputs[slot - 1])

    def _set_toggle(self, name: str, args: list[str]) -> None:
        if len(args) != 1 or args[0].lower() not in _TOGGLES:
            raise CommandError(f"Usage: {name} on|off")
        enabled = _TOGGLES[args[0].lower()]
        if name == "wallet":
            self.session.set_wallet_enabled(enabled)
        else:
            self.session.set_auth_enabled(enabled)
        display.field_updated(name, "on" if enabled else "off")

    def _load_script(self, args: list[str]) -> None:
        if len(args) != 2 or args[0] not in self._script_setters:
            raise CommandError("Usage: load <note|account|tx> <path>")
        target, path = args
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        self._script_setters[target](text)
        display.field_updated(f"{target} script", f"{len(text)} chars from {path}")

    def _show_reference(self, args: list[str]) -> None:
        if len(args) != 1 or args[0] not in _REFERENCES:
            raise CommandError("Usage: ref <wallet|auth>")
        display.reference(*_REFERENCES[args[0]])

    async def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the user asks to quit."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            display.invalid_command(f"Cannot parse command: {exc}")
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        try:
            if command in ("quit", "exit"):
                return False
            elif command == "help":
                display.help_table()
            elif command == "show":
                display.form(self.session.form)
                display.engine_status(self.session.runtime)
            elif command == "note":
                self._set_note_input(args)
            elif command == "asset":
                self.session.set_asset_amount(args[0] if args else "")
                display.field_updated("asset amount", self.session.form.asset_amount)
            elif command in ("wallet", "auth"):
                self._set_toggle(command, args)
            elif command == "load":
                self._load_script(args)
            elif command == "ref":
                self._show_reference(args)
            elif command == "execute":
                await self.execute()
            elif command == "reload":
                await self.reload()
            else:
                raise CommandError(f"Unknown command {command!r}.")
        except CommandError as exc:
            display.invalid_command(str(exc))
        return True

    async def run(self) -> None:
        display.banner(self.config.engine, self.config.init_policy.value)
        await self.start()
        display.help_table()
        while True:
            try:
                line = Prompt.ask("[bold cyan]playground[/bold cyan]")
            except (EOFError, KeyboardInterrupt):
                break
            if not await self.handle(line):
                break
