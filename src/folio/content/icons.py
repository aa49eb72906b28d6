"""Icon references used by the portfolio content. Only the name survives the sync."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Icon:
    display_name: str

    def __call__(self, **props) -> dict:
        return {"icon": self.display_name, **props}


Code2 = Icon("Code2")
Database = Icon("Database")
Server = Icon("Server")
Cloud = Icon("Cloud")
Cpu = Icon("Cpu")
Layout = Icon("Layout")
Sparkles = Icon("Sparkles")
Terminal = Icon("Terminal")
Wrench = Icon("Wrench")
Rocket = Icon("Rocket")
