from dataclasses import dataclass, field
from typing import Protocol, List, Dict, Optional, Sequence, Tuple

@dataclass(frozen=True)
class Block:
    kind: str  # "text" | "bullet" | "subtitle" | "grid" | "repeat" | "pi" | "signature" | "field"
    text: str = ""
    items: Tuple[str, ...] = ()
    rows: int = 0
    key: str = ""

    @classmethod
    def para(cls, text: str) -> "Block":
        return cls("text", text)

    @classmethod
    def bullet(cls, text: str) -> "Block":
        return cls("bullet", text)

    @classmethod
    def subtitle(cls, text: str) -> "Block":
        return cls("subtitle", text)

    @classmethod
    def grid(cls, columns: Sequence[str], rows: int = 2) -> "Block":
        return cls("grid", items=tuple(columns), rows=rows)

    @classmethod
    def repeat(cls, label: str, lines: Sequence[str]) -> "Block":
        return cls("repeat", label, items=tuple(lines))

    @classmethod
    def pi(cls) -> "Block":
        return cls("pi")

    @classmethod
    def signature(cls, role: str = "Investigator") -> "Block":
        return cls("signature", role)

    @classmethod
    def field(cls, key: str, label: str) -> "Block":
        return cls("field", label, key=key)


@dataclass(frozen=True)
class CatalogEntry:
    tag: str
    label: str
    repeatable: bool
    blocks: Tuple[Block, ...]

    @property
    def fields(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((b.key, b.text) for b in self.blocks if b.kind == "field")


@dataclass
class ModuleInstance:
    id: str
    tag: str
    title: str
    repeat_count: Optional[int] = None
    data: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HeaderField:
    key: str
    label: str
    kind: str = "text"  # "text" | "date"
    column: int = 1
    placeholder: str = ""


@dataclass(frozen=True)
class AppConfig:
    name: str
    brand: str
    version: str
    disclaimer: str
    footer: str
    header: Tuple[HeaderField, ...]
    modules: Dict[str, dict]
    filename_field: str = "title"
    filename_suffix: str = "_doc"
    source: str = ""

    @property
    def header_keys(self) -> List[str]:
        return [h.key for h in self.header]

    def clean_fields(self, raw: Dict[str, str]) -> Dict[str, str]:
        return {k: str(raw.get(k) or "") for k in self.header_keys}


# ---------- export tree ----------
@dataclass
class ExportNode:
    kind: str  # "para" | "bullet" | "label" | "subtitle" | "table"
    text: str = ""
    columns: Tuple[str, ...] = ()
    rows: int = 0


@dataclass
class ExportSection:
    heading: str
    nodes: List[ExportNode] = field(default_factory=list)


@dataclass
class ExportDocument:
    title: str
    version_line: str
    header: List[Tuple[str, str, int]]  # (label, value, column)
    disclaimer: str
    sections: List[ExportSection]
    footer: str = ""


class SourceModule(Protocol):
    id: str
    title: str
    repeatable: bool
    blocks: Sequence[Block]
