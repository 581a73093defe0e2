"""Interactive Cerebro shell."""

import re
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cerebro.commands import (
    AddCommand,
    ClearCommand,
    CommandResult,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MetricsCommand,
    RemarkCommand,
    StatusCommand,
)
from cerebro.config import Settings, load_settings
from cerebro.exceptions import CerebroError
from cerebro.logging_setup import setup_logging
from cerebro.logic import Session
from cerebro.model.book import CompanyBook, RecordCollection
from cerebro.model.company import Company
from cerebro.model.metrics import MetricsCalculator, MetricsData
from cerebro.model.sample_data import sample_companies
from cerebro.ui.confirm import ConsoleConfirmer
from cerebro.ui.history import CommandHistory

app = typer.Typer(help="Cerebro company application tracker")

ALL_COMMANDS = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    StatusCommand,
    RemarkCommand,
    FilterCommand,
    FindCommand,
    ListCommand,
    MetricsCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)

PROMPT = "[bold cyan]cerebro>[/bold cyan] "

# up/down arrow escape sequences, in normal and application cursor mode
ARROW_KEYS = re.compile(r"(?:\x1b[\[O][AB])+")
_ARROW_KEY = re.compile(r"\x1b[\[O]([AB])")


def recall(history: CommandHistory, keys: str, draft: str) -> str:
    """Step through history once per arrow key and return the line now recalled."""
    for match in _ARROW_KEY.finditer(keys):
        if match.group(1) == "A":
            recalled = history.previous(draft)
        else:
            recalled = history.next()
        if recalled is not None:
            draft = recalled
    return draft


def prompt_for(draft: str) -> str:
    if not draft:
        return PROMPT
    return f"{PROMPT}[dim]{escape(draft)}[/dim] "


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


@app.callback()
def init(ctx: typer.Context) -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    ctx.obj = settings


def render_companies(companies: list[Company]) -> Table:
    table = Table(title="Companies")
    for col in ("#", "Name", "Status", "Phone", "Email", "Tags", "Remark"):
        table.add_column(col)
    for position, company in enumerate(companies, start=1):
        cells = (
            str(position),
            company.name.full_name,
            str(company.status),
            str(company.phone),
            str(company.email),
            " ".join(str(tag) for tag in company.sorted_tags()),
            str(company.remark),
        )
        # user text may contain square brackets
        table.add_row(*(Text(cell) for cell in cells))
    return table


def render_metrics(metrics: MetricsData) -> Table:
    table = Table(title=f"Application metrics ({metrics.total_companies} companies)")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    for status, count, percentage in metrics.rows():
        table.add_row(status, str(count), f"{percentage:.1f}%")
    return table


def render_help() -> str:
    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)


def show_result(cons: Console, result: CommandResult, book: RecordCollection) -> None:
    """Print feedback and whichever view the result asks for."""
    cons.print(result.feedback, style="yellow" if result.cancelled else "green", markup=False)
    if result.show_help:
        cons.print(Panel(Text(render_help()), title="help"))
    elif result.show_metrics:
        cons.print(render_metrics(MetricsCalculator().calculate(book.all_companies())))
    elif not result.exit:
        cons.print(render_companies(book.current_displayed_list()))


@app.command("shell")
def shell_cmd(
    ctx: typer.Context,
    skip_prompts: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask before destructive commands")
    ] = False,
    empty: Annotated[bool, typer.Option("--empty", help="Start without sample companies")] = False,
) -> None:
    """Start an interactive session over an in-memory company list."""
    settings = _settings(ctx)
    cons = Console()
    book = CompanyBook(() if empty else sample_companies())
    session = Session(
        book,
        ConsoleConfirmer(skip_prompts=skip_prompts or settings.skip_prompts, console=cons),
        CommandHistory(settings.history_size),
    )
    cons.print(render_companies(book.current_displayed_list()))
    draft = ""
    while True:
        try:
            line = cons.input(prompt_for(draft))
        except (EOFError, KeyboardInterrupt):
            cons.print()
            break
        if ARROW_KEYS.fullmatch(line):
            draft = recall(session.history, line, draft)
            continue
        if not line.strip():
            if not draft:
                continue
            line = draft
        draft = ""
        session.history.reset()
        try:
            result = session.execute(line)
        except CerebroError as e:
            cons.print(str(e), style="red", markup=False)
            continue
        show_result(cons, result, book)
        if result.exit:
            break


def main() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
