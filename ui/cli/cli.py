"""CLI entrypoint for milestone-ledger."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Personal milestone ledger")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    ctx: typer.Context,
    caller: str | None = typer.Option(None, "--caller", help="Identity performing the call"),
    height: int = typer.Option(0, "--height", min=0, help="Current block height"),
    root: Path | None = typer.Option(None, "--root", help="Project root holding config/ and workspace/"),
) -> None:
    """Personal milestone ledger."""
    ctx.obj = commands.Invocation(caller=caller, height=height, root=root)


@app.command("register")
def register_cmd(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="Milestone text (ASCII, up to 100 bytes)"),
) -> None:
    """Register your milestone."""
    commands.register(ctx.obj, description=description)


@app.command("transfer")
def transfer_cmd(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Identity that will own the milestone"),
    description: str = typer.Argument(..., help="Milestone text"),
) -> None:
    """Register a milestone on behalf of another identity."""
    commands.transfer(ctx.obj, target=target, description=description)


@app.command("modify")
def modify_cmd(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="New milestone text"),
    completed: bool = typer.Option(..., "--completed/--open", help="Completion flag"),
) -> None:
    """Replace your milestone text and completion flag."""
    commands.modify(ctx.obj, description=description, completed=completed)


@app.command("delete")
def delete_cmd(ctx: typer.Context) -> None:
    """Delete your milestone."""
    commands.delete(ctx.obj)


@app.command("priority")
def priority_cmd(ctx: typer.Context, level: int = typer.Argument(..., help="Priority level (1-3)")) -> None:
    """Set your milestone priority."""
    commands.set_priority(ctx.obj, level=level)


@app.command("deadline")
def deadline_cmd(ctx: typer.Context, offset: int = typer.Argument(..., help="Blocks from now")) -> None:
    """Set your deadline relative to the current height."""
    commands.set_deadline(ctx.obj, offset=offset)


@app.command("get")
def get_cmd(ctx: typer.Context, identity: str | None = typer.Argument(None)) -> None:
    """Show a milestone."""
    commands.get(ctx.obj, identity=identity)


@app.command("completed")
def completed_cmd(ctx: typer.Context, identity: str | None = typer.Argument(None)) -> None:
    """Show whether a milestone is completed."""
    commands.completed(ctx.obj, identity=identity)


@app.command("inspect")
def inspect_cmd(ctx: typer.Context) -> None:
    """Report on your own milestone."""
    commands.inspect(ctx.obj)


@app.command("show-priority")
def show_priority_cmd(ctx: typer.Context, identity: str | None = typer.Argument(None)) -> None:
    commands.show_priority(ctx.obj, identity=identity)


@app.command("show-deadline")
def show_deadline_cmd(ctx: typer.Context, identity: str | None = typer.Argument(None)) -> None:
    commands.show_deadline(ctx.obj, identity=identity)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(ctx.obj)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
