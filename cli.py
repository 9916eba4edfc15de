from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from core.config import ConfigError, load_config  # noqa: E402
from core.export import ExportEncodingError, ExportRenderer, ExportValidationError  # noqa: E402
from core.registry import load_catalog  # noqa: E402
from core.store import InstanceStore  # noqa: E402

logger = logging.getLogger("source_builder.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a clinical-research source document")
    parser.add_argument("--config", type=Path, help="Variant config (defaults to config.toml or $SOURCE_BUILDER_CONFIG)")
    parser.add_argument("--field", "-f", action="append", default=[], metavar="KEY=VALUE", help="Header field value")
    parser.add_argument("--module", "-m", action="append", default=[], metavar="TAG[:N]", help="Module to add, with optional repeat count")
    parser.add_argument("--format", choices=("docx", "pdf"), default="docx", help="Export format")
    parser.add_argument("--output", "-o", type=Path, help="Output path (defaults to the sanitised header file name)")
    parser.add_argument("--list-modules", action="store_true", help="Print the module catalog and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
        catalog = load_catalog(cfg)
    except ConfigError as exc:
        raise SystemExit(str(exc))

    if args.list_modules:
        for tag, label in catalog.options():
            print(f"{tag:20} {label}")
        return

    fields: dict[str, str] = {}
    for item in args.field:
        key, sep, value = item.partition("=")
        if not sep or key not in cfg.header_keys:
            raise SystemExit(f"Unknown header field '{key}'. Expected one of: {', '.join(cfg.header_keys)}")
        fields[key] = value

    store = InstanceStore(catalog)
    for entry in args.module:
        tag, _, count = entry.partition(":")
        inst = store.add(tag)
        if inst is None:
            raise SystemExit(f"Unknown module '{tag}'. Use --list-modules to see the catalog.")
        if count:
            if not count.isdigit() or int(count) < 1:
                raise SystemExit(f"Repeat count for '{tag}' must be a positive integer")
            if not catalog.get(tag).repeatable:
                raise SystemExit(f"'{tag}' is not repeatable")
            store.set_repeat(inst.id, int(count) - 1)

    exporter = ExportRenderer(cfg, catalog)
    try:
        if args.format == "pdf":
            data = exporter.to_pdf(fields, store.instances)
        else:
            data = exporter.to_docx(fields, store.instances)
    except (ExportValidationError, ExportEncodingError) as exc:
        raise SystemExit(str(exc))

    out = args.output or Path(exporter.filename(fields, args.format))
    out.write_bytes(data)
    logger.info("Wrote %s (%d modules)", out, len(store))


if __name__ == "__main__":
    main()
