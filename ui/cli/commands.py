"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import BaseModel

from core.orchestrator import Orchestrator, RuntimeBundle
from core.runtime_config import configure_logging
from ledger.errors import LedgerError
from ledger.types import CallContext

logger = logging.getLogger("ml.cli")


@dataclass
class Invocation:
    """Global options shared by every command."""

    caller: str | None = None
    height: int = 0
    root: Path | None = None


def _runtime(inv: Invocation) -> tuple[RuntimeBundle, CallContext]:
    bundle = Orchestrator(root=inv.root).build(height=inv.height)
    configure_logging(bundle.config.get("logging", {}).get("level", "INFO"))
    caller = inv.caller or str(bundle.config.get("runtime", {}).get("default_caller", "local-user"))
    return bundle, bundle.clock.context_for(caller)


@contextmanager
def _reporting_errors() -> Iterator[None]:
    try:
        yield
    except LedgerError as exc:
        typer.echo(f"error[{exc.code}]: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_model(model: BaseModel) -> None:
    typer.echo(json.dumps(model.model_dump(), indent=2))


def register(inv: Invocation, description: str) -> None:
    """Register the caller's milestone."""
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.register(description, ctx=ctx))


def transfer(inv: Invocation, target: str, description: str) -> None:
    """Register a milestone owned by ``target``."""
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.transfer(target, description, ctx=ctx))


def modify(inv: Invocation, description: str, completed: bool) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.modify(description, completed, ctx=ctx))


def delete(inv: Invocation) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.delete(ctx=ctx))


def set_priority(inv: Invocation, level: int) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.set_priority(level, ctx=ctx))


def set_deadline(inv: Invocation, offset: int) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(bundle.ledger.set_deadline(offset, ctx=ctx))


def get(inv: Invocation, identity: str | None) -> None:
    """Show a milestone; defaults to the caller's own."""
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        _echo_model(bundle.ledger.get(identity or ctx.caller))


def completed(inv: Invocation, identity: str | None) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        typer.echo(json.dumps(bundle.ledger.is_completed(identity or ctx.caller)))


def inspect(inv: Invocation) -> None:
    bundle, ctx = _runtime(inv)
    _echo_model(bundle.ledger.inspect(ctx=ctx))


def show_priority(inv: Invocation, identity: str | None) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        _echo_model(bundle.ledger.get_priority(identity or ctx.caller))


def show_deadline(inv: Invocation, identity: str | None) -> None:
    bundle, ctx = _runtime(inv)
    with _reporting_errors():
        _echo_model(bundle.ledger.get_deadline(identity or ctx.caller))


def config_show(inv: Invocation) -> None:
    """Show effective runtime config."""
    bundle, _ = _runtime(inv)
    typer.echo(json.dumps(bundle.config, indent=2, default=str))
