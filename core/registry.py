import logging
from importlib import import_module
from typing import Dict, Iterator, List, Optional, Tuple

from core.config import ConfigError
from core.types import AppConfig, CatalogEntry, SourceModule

logger = logging.getLogger(__name__)


class Catalog:
    def __init__(self, entries: List[CatalogEntry]):
        self._entries: Dict[str, CatalogEntry] = {}
        for e in entries:
            if e.tag in self._entries:
                raise ConfigError(f"module '{e.tag}' registered twice")
            self._entries[e.tag] = e

    def get(self, tag: str) -> Optional[CatalogEntry]:
        return self._entries.get(tag)

    def options(self) -> List[Tuple[str, str]]:
        return [(e.tag, e.label) for e in self._entries.values()]

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def entry_from_module(mod: SourceModule, label: Optional[str] = None) -> CatalogEntry:
    return CatalogEntry(
        tag=mod.id,
        label=label or mod.title,
        repeatable=bool(getattr(mod, "repeatable", False)),
        blocks=tuple(mod.blocks),
    )


def load_catalog(cfg: AppConfig) -> Catalog:
    mod_cfg = cfg.modules
    ordered = sorted(((m, v.get("order", 999)) for m, v in mod_cfg.items() if v.get("enabled", True)), key=lambda x: x[1])
    entries = []
    for name, _ in ordered:
        try:
            mod = import_module(f"modules.{name}.{name}")
        except ModuleNotFoundError as exc:
            if not (exc.name or "").startswith("modules"):
                raise
            raise ConfigError(f"unknown module '{name}' in {cfg.source or 'config'}") from exc
        entries.append(entry_from_module(mod, label=mod_cfg[name].get("label")))
    logger.info("Catalog loaded: %d modules from %s", len(entries), cfg.source or "config")
    return Catalog(entries)
