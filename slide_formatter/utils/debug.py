"""Helpers to persist intermediate representations for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from slide_formatter.model.document_model import DeckModel


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, model: DeckModel) -> Path:
        """Persist the deck model as JSON for offline analysis."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "deck_model.json"
        target.write_text(json.dumps(self.serialize(model), indent=2))
        return target

    def serialize(self, value: Any) -> Any:
        if is_dataclass(value):
            # directive unions are kept apart by their class name
            payload = {"kind": type(value).__name__}
            payload.update({f.name: self.serialize(getattr(value, f.name)) for f in fields(value)})
            return payload
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {str(self.serialize(k)): self.serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.serialize(v) for v in value]
        return value
