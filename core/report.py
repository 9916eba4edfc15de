import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib import colors
from core.export import ExportEncodingError
from core.types import ExportDocument, ExportNode

logger = logging.getLogger(__name__)

# base-14 fonts have no ballot box or subscript two
PDF_GLYPHS = {"☐": "[  ]", "□": "[  ]", "₂": "2"}


def _pdf_text(text: str) -> str:
    for src, dst in PDF_GLYPHS.items():
        text = text.replace(src, dst)
    return escape(text)


def _grid(node: ExportNode, width: float) -> Table:
    cols = len(node.columns) or 1
    styles = getSampleStyleSheet()
    small = styles["BodyText"].clone("GridCell", fontSize=7, leading=8)
    head = [Paragraph(_pdf_text(c), small) for c in node.columns]
    tbl = Table(
        [head] + [[""] * cols for _ in range(node.rows)],
        hAlign='LEFT',
        colWidths=[width / cols] * cols,
        rowHeights=[None] + [18] * node.rows,
    )
    tbl.setStyle(TableStyle([
        ('BACKGROUND', (0,0), (-1,0), colors.HexColor('#eeeeee')),
        ('GRID', (0,0), (-1,-1), 0.25, colors.grey),
        ('VALIGN', (0,0), (-1,-1), 'TOP'),
    ]))
    return tbl


def _header_table(doc: ExportDocument, width: float, style) -> Table:
    cols = []
    for column in (1, 2):
        cols.append([
            Paragraph(f"<b>{_pdf_text(label)}:</b> {_pdf_text(value)}", style)
            for label, value, col in doc.header if col == column
        ] or [""])
    tbl = Table([cols], hAlign='LEFT', colWidths=[width / 2, width / 2])
    tbl.setStyle(TableStyle([
        ('BOX', (0,0), (-1,-1), 0.5, colors.grey),
        ('INNERGRID', (0,0), (-1,-1), 0.25, colors.grey),
        ('VALIGN', (0,0), (-1,-1), 'TOP'),
    ]))
    return tbl


def build_pdf(doc: ExportDocument) -> bytes:
    buf = io.BytesIO()
    pdf = SimpleDocTemplate(buf, pagesize=A4, title=doc.title or "Source Document")
    styles = getSampleStyleSheet()
    width = pdf.width
    bullet = styles["Normal"].clone("SourceBullet", leftIndent=14, bulletIndent=4)
    story = []

    story.append(Paragraph(f"<b>{_pdf_text(doc.title)}</b>", styles["Title"]))
    story.append(Paragraph(_pdf_text(doc.version_line), styles["Normal"]))
    story.append(Spacer(1, 8))
    story.append(_header_table(doc, width, styles["Normal"]))
    story.append(Spacer(1, 8))
    story.append(Paragraph(_pdf_text(doc.disclaimer), styles['Italic']))

    for section in doc.sections:
        story.append(Paragraph(_pdf_text(section.heading), styles["Heading2"]))
        for node in section.nodes:
            if node.kind == "table":
                story.append(_grid(node, width))
                story.append(Spacer(1, 4))
            elif node.kind == "bullet":
                story.append(Paragraph(_pdf_text(node.text), bullet, bulletText="•"))
            elif node.kind in ("label", "subtitle"):
                story.append(Paragraph(f"<b>{_pdf_text(node.text)}</b>", styles["Normal"]))
            else:
                story.append(Paragraph(_pdf_text(node.text), styles["Normal"]))

    if doc.footer:
        story.append(Spacer(1, 10))
        story.append(Paragraph(_pdf_text(doc.footer), styles['Italic']))

    try:
        pdf.build(story)
    except Exception as exc:
        logger.exception("PDF export failed")
        raise ExportEncodingError(f"Could not build PDF: {exc}") from exc
    return buf.getvalue()
