"""Expansion of catalog blocks into render pieces.

Both the screen preview and the export document walk the pieces produced
here, so every literal prompt a module contributes is resolved in one place:
repeat blocks are unrolled ``repeat_count`` times, assessment, signature and
data-bag lines get their final text. Renderers only decide the format.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Tuple

from core.types import AppConfig, CatalogEntry, ModuleInstance

PI_ASSESSMENT = (
    "PI overall assessment:  Normal ☐   Abnormal (NCS) ☐   Abnormal (CS) ☐   "
    "Comments: ____________________________________"
)
SIGN_LINE = "________________________________"
BLANK = "__________"


@dataclass(frozen=True)
class Piece:
    kind: str  # "text" | "bullet" | "subtitle" | "grid" | "reading" | "pi" | "signature" | "field"
    text: str = ""
    columns: Tuple[str, ...] = ()
    rows: int = 0
    lines: Tuple[str, ...] = ()


def signature_text(role: str) -> str:
    return f"{role} (print/sign/date): {SIGN_LINE}"


def field_text(label: str, value: str) -> str:
    return f"{label}: {(value or '').strip() or BLANK}"


def repeat_count(entry: CatalogEntry, inst: ModuleInstance) -> int:
    if not entry.repeatable:
        return 1
    return max(1, inst.repeat_count or 1)


def expand(entry: CatalogEntry, inst: ModuleInstance) -> Iterator[Piece]:
    n = repeat_count(entry, inst)
    for b in entry.blocks:
        if b.kind in ("text", "bullet", "subtitle"):
            yield Piece(b.kind, b.text)
        elif b.kind == "grid":
            yield Piece("grid", columns=b.items, rows=b.rows)
        elif b.kind == "repeat":
            for i in range(1, n + 1):
                yield Piece("reading", f"{b.text} {i}", lines=b.items)
        elif b.kind == "pi":
            yield Piece("pi", PI_ASSESSMENT)
        elif b.kind == "signature":
            yield Piece("signature", signature_text(b.text))
        elif b.kind == "field":
            yield Piece("field", field_text(b.text, inst.data.get(b.key, "")))
        else:
            raise ValueError(f"unknown block kind '{b.kind}' in module '{entry.tag}'")


def header_rows(cfg: AppConfig, fields: Dict[str, str], date_fn: Callable[[str], str]) -> List[Tuple[str, str, int]]:
    clean = cfg.clean_fields(fields)
    rows = []
    for h in cfg.header:
        value = clean[h.key]
        if h.kind == "date":
            value = date_fn(value)
        rows.append((h.label, value, h.column))
    return rows
