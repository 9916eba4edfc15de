from html import escape
from typing import Dict, List, Sequence

from core.dates import display_date
from core.layout import Piece, expand, header_rows
from core.registry import Catalog
from core.types import AppConfig, ModuleInstance

CARD_CSS = """
<style>
.sb-card{border:1px solid #e2e8f0;border-radius:10px;padding:12px;margin-bottom:10px;background:#fff;color:#334155;font-size:0.9rem}
.sb-title{font-weight:600;margin-bottom:6px}
.sb-sub{border:1px solid #e2e8f0;border-radius:8px;padding:8px;margin:6px 0}
.sb-muted{font-size:0.75rem;color:#64748b}
.sb-subtitle{font-weight:600;margin-top:8px}
.sb-pi{border:1px solid #e2e8f0;border-radius:8px;padding:8px;margin:6px 0}
.sb-grid{border-collapse:collapse;width:100%;margin:6px 0}
.sb-grid th,.sb-grid td{border:1px solid #94a3b8;padding:4px;font-size:0.75rem;text-align:left}
.sb-head{display:grid;grid-template-columns:1fr 1fr;gap:4px 16px;margin-top:6px}
.sb-disclaimer{font-style:italic;margin-top:8px}
</style>
"""

PRINT_CSS = """
<style>
body{font-family:Helvetica,Arial,sans-serif;color:#0f172a}
.print-only{display:none}
.screen-only{margin:8px 0}
@media print{.print-only{display:block}.screen-only{display:none}.sb-card{break-inside:avoid}}
.sb-foot{display:flex;justify-content:space-between;border-top:1px solid #94a3b8;margin-top:16px;padding-top:6px;font-size:0.75rem}
</style>
"""


def _grid_html(columns: Sequence[str], rows: int) -> str:
    head = "".join(f"<th>{escape(c)}</th>" for c in columns)
    body = "".join("<tr>" + "<td>&nbsp;</td>" * len(columns) + "</tr>" for _ in range(rows))
    return f'<table class="sb-grid"><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>'


def pieces_html(pieces: Sequence[Piece]) -> str:
    out: List[str] = []
    bullets: List[str] = []

    def flush():
        if bullets:
            out.append("<ul>" + "".join(f"<li>{escape(b)}</li>" for b in bullets) + "</ul>")
            bullets.clear()

    for p in pieces:
        if p.kind == "bullet":
            bullets.append(p.text)
            continue
        flush()
        if p.kind == "subtitle":
            out.append(f'<div class="sb-subtitle">{escape(p.text)}</div>')
        elif p.kind == "grid":
            out.append(_grid_html(p.columns, p.rows))
        elif p.kind == "reading":
            lines = "".join(f"<div>{escape(x)}</div>" for x in p.lines)
            out.append(f'<div class="sb-sub"><div class="sb-muted">{escape(p.text)}</div>{lines}</div>')
        elif p.kind == "pi":
            out.append(f'<div class="sb-pi">{escape(p.text)}</div>')
        else:
            out.append(f"<div>{escape(p.text)}</div>")
    flush()
    return "".join(out)


class PreviewRenderer:
    """Screen and print rendering of a document, as HTML."""

    def __init__(self, cfg: AppConfig, catalog: Catalog):
        self.cfg = cfg
        self.catalog = catalog

    def header_html(self, fields: Dict[str, str]) -> str:
        cells = []
        for column in (1, 2):
            for label, value, col in header_rows(self.cfg, fields, display_date):
                if col == column:
                    cells.append(f"<div><b>{escape(label)}:</b> {escape(value)}</div>")
        brand = escape(self.cfg.brand)
        version = escape(f"Source Version: {self.cfg.version}")
        return (
            f'<div class="sb-card"><div class="sb-title">{brand}</div>'
            f'<div class="sb-muted">{version}</div>'
            f'<div class="sb-head">{"".join(cells)}</div>'
            f'<div class="sb-disclaimer">{escape(self.cfg.disclaimer)}</div></div>'
        )

    def module_body_html(self, inst: ModuleInstance) -> str:
        entry = self.catalog.get(inst.tag)
        if entry is None:
            return ""
        return pieces_html(list(expand(entry, inst)))

    def module_html(self, inst: ModuleInstance) -> str:
        return (
            f'<div class="sb-card"><div class="sb-title">{escape(inst.title)}</div>'
            f"{self.module_body_html(inst)}</div>"
        )

    def empty_html(self) -> str:
        return '<div class="sb-card sb-muted">No modules yet. Use <em>Add module</em> to get started.</div>'

    def print_html(self, fields: Dict[str, str], instances: Sequence[ModuleInstance]) -> str:
        mods = "".join(self.module_html(m) for m in instances)
        foot = (
            f'<div class="sb-foot"><div>{escape(self.cfg.footer)}</div>'
            f"<div>Original Source • Version {escape(self.cfg.version)}</div></div>"
        )
        return (
            f"<!DOCTYPE html><html><head><meta charset=\"utf-8\"><title>{escape(self.cfg.name)}</title>"
            f"{CARD_CSS}{PRINT_CSS}</head><body>"
            '<div class="screen-only"><button onclick="window.print()">Print / Save as PDF</button>'
            '<div class="sb-muted">The print layout is shown only on paper.</div></div>'
            f'<div class="print-only">{self.header_html(fields)}{mods}{foot}</div>'
            "</body></html>"
        )
