"""
Typer Application Entry Points

Thin command-line shell over the task store and factory.
"""

import logging

import typer
from rich.console import Console
from rich.markup import escape

from todo import __version__
from todo.persistence import JsonFileStore, StorageError
from todo.tasks import TaskItem, TaskStatus, create

app = typer.Typer(
    help="todo - a task list kept in a JSON file",
    rich_markup_mode="rich"
)
console = Console()


def _fail(error: StorageError) -> None:
    console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(code=1)


@app.command("create")
def create_task(
    title: str = typer.Argument(..., help="Task title (also its identifier)"),
    status: TaskStatus = typer.Option(TaskStatus.PENDING, "--status", "-s",
                                      parser=TaskStatus.from_string,
                                      help="Task status: pending or done"),
):
    """
    Create a task and save it.

    Examples:
        todo create shopping
        todo create laundry --status done
    """
    try:
        task = create(title, status)
    except StorageError as e:
        _fail(e)
    console.print(f"[green]Created:[/green] {escape(str(task))}")


@app.command()
def get(task_id: str = typer.Argument(..., help="Task identifier")):
    """Show a single task."""
    try:
        item = JsonFileStore(TaskItem).get_one(task_id)
    except StorageError as e:
        _fail(e)
    console.print(f"{escape(item.title)}: {item.status}")


@app.command()
def delete(task_id: str = typer.Argument(..., help="Task identifier")):
    """Delete a task. Unknown identifiers are ignored."""
    try:
        JsonFileStore(TaskItem).delete_one(task_id)
    except StorageError as e:
        _fail(e)
    console.print(f"[green]Deleted:[/green] {escape(task_id)}")


@app.command("list")
def list_tasks():
    """List every stored task."""
    try:
        items = JsonFileStore(TaskItem).load_all()
    except StorageError as e:
        _fail(e)
    console.print(f"[bold cyan]Found {len(items)} tasks:[/bold cyan]")
    for task_id, item in items.items():
        console.print(f"{escape(task_id)}: {item.status}")


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", "-V", help="Show version"),
):
    """todo - a task list kept in a JSON file"""
    if version:
        console.print(f"todo v{__version__}")
        raise typer.Exit()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.basicConfig(level=logging.DEBUG)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
