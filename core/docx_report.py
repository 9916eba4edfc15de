from __future__ import annotations
import logging
from io import BytesIO

from docx import Document
from docx.shared import Pt
from core.export import ExportEncodingError
from core.types import ExportDocument, ExportNode

logger = logging.getLogger(__name__)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _add_grid(doc, node: ExportNode) -> None:
    table = doc.add_table(rows=1 + node.rows, cols=max(1, len(node.columns)))
    table.style = "Table Grid"
    for idx, col in enumerate(node.columns):
        cell = table.cell(0, idx)
        run = cell.paragraphs[0].add_run(col)
        run.bold = True
        run.font.size = Pt(8)


def _add_header_table(doc, export: ExportDocument) -> None:
    table = doc.add_table(rows=1, cols=2)
    table.style = "Table Grid"
    for column in (1, 2):
        cell = table.cell(0, column - 1)
        first = True
        for label, value, col in export.header:
            if col != column:
                continue
            p = cell.paragraphs[0] if first else cell.add_paragraph()
            first = False
            p.add_run(f"{label}: ").bold = True
            p.add_run(value)


def build_docx(export: ExportDocument) -> bytes:
    try:
        doc = Document()
        doc.add_heading(export.title, level=1)
        doc.add_paragraph(export.version_line)
        _add_header_table(doc, export)
        doc.add_paragraph(export.disclaimer)
        for section in export.sections:
            doc.add_heading(section.heading, level=2)
            for node in section.nodes:
                if node.kind == "table":
                    _add_grid(doc, node)
                elif node.kind == "bullet":
                    doc.add_paragraph(node.text, style="List Bullet")
                elif node.kind in ("label", "subtitle"):
                    doc.add_paragraph().add_run(node.text).bold = True
                else:
                    doc.add_paragraph(node.text)
        if export.footer:
            doc.add_paragraph(export.footer)
        bio = BytesIO()
        doc.save(bio)
    except Exception as exc:
        logger.exception("DOCX export failed")
        raise ExportEncodingError(f"Could not build Word document: {exc}") from exc
    return bio.getvalue()
