import logging
import re
from typing import Dict, List, Optional, Sequence

from core.dates import to_dmmmyyyy, validate_dmmmyyyy
from core.layout import Piece, expand, header_rows
from core.registry import Catalog
from core.types import AppConfig, ExportDocument, ExportNode, ExportSection, ModuleInstance

logger = logging.getLogger(__name__)

MAX_NAME = 40


class ExportValidationError(ValueError):
    """Raised when header fields fail validation; nothing is exported."""


class ExportEncodingError(RuntimeError):
    """Raised when the export tree cannot be encoded into a file."""


def safe_name(value: Optional[str]) -> str:
    return re.sub(r"[^a-z0-9]+", "_", (value or "").strip(), flags=re.I)[:MAX_NAME]


def pieces_to_nodes(pieces: Sequence[Piece]) -> List[ExportNode]:
    nodes: List[ExportNode] = []
    for p in pieces:
        if p.kind == "bullet":
            nodes.append(ExportNode("bullet", p.text))
        elif p.kind == "subtitle":
            nodes.append(ExportNode("subtitle", p.text))
        elif p.kind == "grid":
            nodes.append(ExportNode("table", columns=p.columns, rows=p.rows))
        elif p.kind == "reading":
            nodes.append(ExportNode("label", p.text))
            nodes.extend(ExportNode("bullet", x) for x in p.lines)
        else:
            nodes.append(ExportNode("para", p.text))
    return nodes


class ExportRenderer:
    """Builds the export document tree and hands it to the file encoders."""

    def __init__(self, cfg: AppConfig, catalog: Catalog):
        self.cfg = cfg
        self.catalog = catalog

    def validate(self, fields: Dict[str, str]) -> Optional[str]:
        clean = self.cfg.clean_fields(fields)
        for h in self.cfg.header:
            if h.kind == "date" and clean[h.key].strip():
                err = validate_dmmmyyyy(clean[h.key])
                if err:
                    return f"{h.label}: {err}"
        return None

    def section(self, inst: ModuleInstance) -> ExportSection:
        entry = self.catalog.get(inst.tag)
        if entry is None:
            raise ExportValidationError(f"module type '{inst.tag}' is not in the catalog")
        return ExportSection(heading=inst.title, nodes=pieces_to_nodes(list(expand(entry, inst))))

    def build(self, fields: Dict[str, str], instances: Sequence[ModuleInstance]) -> ExportDocument:
        err = self.validate(fields)
        if err:
            raise ExportValidationError(err)
        return ExportDocument(
            title=self.cfg.brand,
            version_line=f"Source Version: {self.cfg.version}",
            header=header_rows(self.cfg, fields, to_dmmmyyyy),
            disclaimer=self.cfg.disclaimer,
            sections=[self.section(m) for m in instances],
            footer=self.cfg.footer,
        )

    def filename(self, fields: Dict[str, str], ext: str) -> str:
        base = safe_name(fields.get(self.cfg.filename_field)) or "source"
        return f"{base}{self.cfg.filename_suffix}.{ext}"

    def to_pdf(self, fields: Dict[str, str], instances: Sequence[ModuleInstance]) -> bytes:
        from core.report import build_pdf

        doc = self.build(fields, instances)
        logger.info("Exporting PDF with %d sections", len(doc.sections))
        return build_pdf(doc)

    def to_docx(self, fields: Dict[str, str], instances: Sequence[ModuleInstance]) -> bytes:
        from core.docx_report import build_docx

        doc = self.build(fields, instances)
        logger.info("Exporting DOCX with %d sections", len(doc.sections))
        return build_docx(doc)
