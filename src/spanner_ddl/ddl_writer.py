from __future__ import annotations
from pathlib import Path


def write_ddl(ddl: str, out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(ddl, encoding="utf-8")
    return out_path
