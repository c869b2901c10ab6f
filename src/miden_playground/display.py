# display.py
# All terminal output for the playground.
#
# This module owns presentation entirely. The orchestration modules never
# format strings; console.py calls named functions here. It only reads
# session state, never writes it.
#
# Colour language:
#   cyan: form contents / prompts
#   yellow: engine lifecycle
#   green: results
#   red: errors, refused actions

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from miden_playground.models import ExecutionResult, FormState, RuntimeState

console = Console()

OUTPUT_LABELS = {
    "account_code_commitment": "Account Code Commitment",
    "account_delta_nonce": "Account Delta Nonce",
    "account_delta_storage": "Account Delta Storage",
    "account_delta_vault": "Account Delta Vault",
    "account_hash": "Account Hash",
    "account_storage_commitment": "Account Storage Commitment",
    "account_vault_commitment": "Account Vault Commitment",
    "cycle_count": "Cycle Count",
    "trace_length": "Trace Length",
}

COMMANDS = [
    ("show", "Show the current form"),
    ("note <1-4> <value>", "Set a note input (digits only, anything else becomes 0)"),
    ("asset <value>", "Set the asset amount (digits only, empty to clear)"),
    ("wallet on|off", "Toggle the basic wallet component"),
    ("auth on|off", "Toggle the basic auth component"),
    ("load <note|account|tx> <path>", "Replace a script with the contents of a file"),
    ("ref <wallet|auth>", "Show read-only reference code"),
    ("execute", "Execute the transaction"),
    ("reload", "Reset the session and reload the engine"),
    ("quit", "Exit"),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _on_off(flag: bool) -> str:
    return "[bold green]on[/bold green]" if flag else "[dim]off[/dim]"


def _source(text: str, title: str) -> Panel:
    body = Syntax(text, "text", line_numbers=True) if text else Text("(empty)", style="dim")
    return Panel(body, title=title, border_style="cyan", padding=(0, 1))


# ---------------------------------------------------------------------------
# Session entry
# ---------------------------------------------------------------------------


def banner(engine: str, init_policy: str) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Developer Playground[/bold cyan]\n"
            "[dim]Author note, account and transaction scripts and execute them[/dim]\n\n"
            f"[dim]Engine      :[/dim] [white]{engine or '(not configured)'}[/white]\n"
            f"[dim]Init policy :[/dim] [white]{init_policy}[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


def help_table() -> None:
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
    table.add_column("Command", style="bold cyan")
    table.add_column("Description", style="white")
    for command, description in COMMANDS:
        table.add_row(command, description)
    console.print(table)


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------


def form(state: FormState) -> None:
    console.print()
    console.print(_source(state.note_script, "Note Script"))
    console.print(_source(state.transaction_script, "Transaction Script"))
    console.print(_source(state.account_code, "Account Code"))

    table = Table(box=box.SIMPLE_HEAVY, border_style="cyan", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold white", width=16)
    table.add_column("Value", style="white")
    for index, value in enumerate(state.note_inputs):
        table.add_row(f"Note input {index + 1}", escape(value) or "[dim]—[/dim]")
    table.add_row("Asset amount", escape(state.asset_amount) or "[dim]—[/dim]")
    table.add_row("Wallet", _on_off(state.wallet_enabled))
    table.add_row("Auth", _on_off(state.auth_enabled))
    console.print(table)


def reference(title: str, text: str) -> None:
    console.print(
        Panel(Syntax(text, "text", line_numbers=True), title=f"{title} (read-only)", border_style="dim")
    )


def field_updated(name: str, value: str) -> None:
    console.print(f"  [cyan]{name}[/cyan] [dim]=[/dim] [white]{escape(repr(value))}[/white]")


# ---------------------------------------------------------------------------
# Engine lifecycle
# ---------------------------------------------------------------------------


def engine_loading() -> None:
    console.print(_label("ENGINE", "yellow"), "[yellow] Loading execution engine…[/yellow]")


def engine_status(runtime: RuntimeState) -> None:
    if runtime.ready:
        console.print(_label("ENGINE", "green"), "[green] Ready.[/green]")
    elif runtime.init_error:
        error(runtime.init_error)
    else:
        console.print(_label("ENGINE", "yellow"), "[yellow] Not initialized.[/yellow]")


def busy() -> None:
    console.print(
        _label("BUSY", "yellow"),
        "[yellow] A transaction is still executing. Wait for it to finish.[/yellow]",
    )


def reload_refused() -> None:
    console.print(_label("RELOAD", "red"), "[red] Cannot reload while a transaction is executing.[/red]")


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


def outputs(result: ExecutionResult) -> None:
    console.print()
    table = Table(box=box.SIMPLE_HEAVY, border_style="green", show_header=False, padding=(0, 1))
    table.add_column("Output", style="bold white", width=28)
    table.add_column("Value", style="green", overflow="fold")
    for field, label in OUTPUT_LABELS.items():
        value = getattr(result, field)
        table.add_row(label, "[dim]—[/dim]" if value is None else escape(str(value)))
    console.print(Panel(table, title=_label("OUTPUTS", "green"), border_style="green", padding=(0, 1)))


def error(message: str) -> None:
    console.print()
    console.print(
        Panel(
            Text(message, style="bold white"),
            title=_label("ERROR", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


def invalid_command(message: str) -> None:
    console.print(f"[red]  {escape(message)}[/red] [dim](type 'help' for commands)[/dim]")
