"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.runtime_config import ensure_runtime_dirs, load_effective_config
from core.state_manager import HeightClock
from ledger.milestone_ledger import MilestoneLedger
from ledger.stores.sql_store import SQLStore


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    ledger: MilestoneLedger
    clock: HeightClock


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or Path.cwd()).resolve()

    def build(self, height: int = 0) -> RuntimeBundle:
        config = load_effective_config(self.root)
        paths = ensure_runtime_dirs(self.root, config)

        sql_store = SQLStore(paths["db_path"])
        ledger_cfg = config.get("ledger", {})
        ledger = MilestoneLedger(
            sql_store=sql_store,
            description_max_bytes=int(ledger_cfg.get("description_max_bytes", 100)),
            priority_min=int(ledger_cfg.get("priority_min", 1)),
            priority_max=int(ledger_cfg.get("priority_max", 3)),
        )
        return RuntimeBundle(config=config, ledger=ledger, clock=HeightClock(start=height))
