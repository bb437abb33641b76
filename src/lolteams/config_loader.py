"""Persist and load CSV column mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass
class MappingProfile:
    columns: Dict[str, str]

    @classmethod
    def load(cls, path: Path) -> "MappingProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(columns=data.get("columns", {}))

    def save(self, path: Path) -> None:
        payload = {"columns": self.columns}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
