# runtime.py
# Lifecycle of the external execution engine.
#
# The engine is opaque: it loads once (init) and then answers execute()
# calls. Either call may be synchronous or return an awaitable. RuntimeHandle
# is the only writer of SessionState.runtime.

import asyncio
import importlib
import inspect
import logging
from typing import Any, Protocol

from miden_playground.errors import EngineInitError, EngineNotReadyError
from miden_playground.session import SessionState

logger = logging.getLogger(__name__)


async def resolve(value: Any) -> Any:
    """Await `value` if the engine handed back an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


class Engine(Protocol):
    def init(self) -> Any: ...

    def execute(
        self,
        account_code: str,
        note_script: str,
        note_inputs: list[int],
        transaction_script: str,
        asset_amount: int | None,
        wallet_enabled: bool,
        auth_enabled: bool,
    ) -> Any: ...


class ModuleEngine:
    """
    Engine backed by an importable module.

    The module must define execute() with the Engine signature and may
    define init(), which is called (and awaited if needed) on load.
    """

    def __init__(self, module_path: str) -> None:
        self._module_path = module_path
        self._module: Any = None

    async def init(self) -> None:
        if not self._module_path:
            raise EngineInitError("No engine module configured (set PLAYGROUND_ENGINE).")
        module = importlib.import_module(self._module_path)
        if not callable(getattr(module, "execute", None)):
            raise EngineInitError(f"Engine module {self._module_path!r} has no execute().")
        module_init = getattr(module, "init", None)
        if callable(module_init):
            await resolve(module_init())
        self._module = module

    def execute(self, *args: Any) -> Any:
        if self._module is None:
            raise EngineInitError(f"Engine module {self._module_path!r} is not loaded.")
        return self._module.execute(*args)


class RuntimeHandle:
    """Guarantees the engine is loaded before any execute() reaches it."""

    def __init__(self, engine: Engine, session: SessionState) -> None:
        self.engine = engine
        self._session = session
        self._lock = asyncio.Lock()

    @property
    def ready(self) -> bool:
        return self._session.runtime.ready

    async def initialize(self, force: bool = False) -> None:
        """
        Load the engine. No-op when already ready unless `force` is set.

        On failure the runtime is left not-ready and EngineInitError is
        raised; nothing may execute until a later initialize() succeeds.
        """
        async with self._lock:
            if self.ready and not force:
                return

            self._session.runtime.ready = False
            logger.info("Initializing execution engine.")
            try:
                await resolve(self.engine.init())
            except Exception as exc:
                message = f"Failed to initialize engine: {str(exc) or type(exc).__name__}"
                self._session.runtime.init_error = message
                logger.error(message)
                raise EngineInitError(message) from exc

            self._session.runtime.ready = True
            self._session.runtime.init_error = None
            logger.info("Execution engine initialized.")

    def ensure_ready(self) -> None:
        if not self.ready:
            raise EngineNotReadyError("Engine not initialized yet.")
