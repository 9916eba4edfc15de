import logging
import os
import tomllib
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from core.types import AppConfig, HeaderField

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG = ROOT / "config.toml"
VARIANTS_DIR = ROOT / "variants"
CONFIG_ENV = "SOURCE_BUILDER_CONFIG"

HEADER_KINDS = ("text", "date")


class ConfigError(ValueError):
    """Raised when a variant config file is missing or malformed."""


def default_config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG))


def list_variants() -> Dict[str, Path]:
    variants = {"default": DEFAULT_CONFIG}
    if VARIANTS_DIR.is_dir():
        for p in sorted(VARIANTS_DIR.glob("*.toml")):
            variants[p.stem] = p
    return variants


def variant_choices() -> Tuple[Dict[str, str], str]:
    """Selector options (config path -> variant name) and the path to preselect.

    The default entry always points at config.toml; an environment override is
    preselected and added under its file stem when it lives outside variants/.
    """
    choices = {str(p.resolve()): name for name, p in list_variants().items()}
    current = str(default_config_path().resolve())
    if current not in choices:
        choices[current] = Path(current).stem
    return choices, current


def _as_int(value, what: str) -> int:
    # TOML integers only; bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{what} must be an integer, got {value!r}")
    return value


def _header_field(raw: dict, idx: int) -> HeaderField:
    if not isinstance(raw, dict):
        raise ConfigError(f"header entry #{idx + 1} must be a table")
    key = str(raw.get("key") or "").strip()
    if not key:
        raise ConfigError(f"header entry #{idx + 1} has no key")
    kind = raw.get("kind", "text")
    if kind not in HEADER_KINDS:
        raise ConfigError(f"header field '{key}' has unknown kind '{kind}'")
    column = _as_int(raw.get("column", 1), f"header field '{key}' column")
    if column not in (1, 2):
        raise ConfigError(f"header field '{key}' must sit in column 1 or 2")
    return HeaderField(
        key=key,
        label=str(raw.get("label", key)),
        kind=kind,
        column=column,
        placeholder=str(raw.get("placeholder", "")),
    )


def _module_settings(name: str, raw) -> dict:
    if not isinstance(raw, dict):
        raise ConfigError(f"[modules.{name}] must be a table")
    settings = dict(raw)
    if "order" in settings:
        settings["order"] = _as_int(settings["order"], f"[modules.{name}] order")
    return settings


def parse_config(cfg: dict, source: str = "") -> AppConfig:
    app = cfg.get("app", {})
    if not isinstance(app, dict):
        raise ConfigError(f"[app] must be a table in {source or 'config'}")
    raw_header = cfg.get("header", [])
    if not isinstance(raw_header, list):
        raise ConfigError(f"header must be an array of tables in {source or 'config'}")
    header = tuple(_header_field(h, i) for i, h in enumerate(raw_header))
    keys = [h.key for h in header]
    if len(set(keys)) != len(keys):
        raise ConfigError(f"duplicate header keys in {source or 'config'}")

    raw_modules = cfg.get("modules", {})
    if not isinstance(raw_modules, dict):
        raise ConfigError(f"[modules] must be a table in {source or 'config'}")
    if not raw_modules:
        raise ConfigError(f"no modules configured in {source or 'config'}")
    modules = {name: _module_settings(name, v) for name, v in raw_modules.items()}

    filename_field = app.get("filename_field", "title")
    if keys and filename_field not in keys:
        raise ConfigError(f"filename_field '{filename_field}' is not a header key")

    return AppConfig(
        name=app.get("name", "Source Builder"),
        brand=app.get("brand", ""),
        version=app.get("version", ""),
        disclaimer=app.get("disclaimer", ""),
        footer=app.get("footer", ""),
        header=header,
        modules=modules,
        filename_field=filename_field,
        filename_suffix=app.get("filename_suffix", "_doc"),
        source=source,
    )


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    p = Path(path) if path else default_config_path()
    try:
        with open(p, "rb") as f:
            cfg = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {p}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {p}: {exc}") from exc
    logger.debug("Loaded config %s", p)
    return parse_config(cfg, source=str(p))
