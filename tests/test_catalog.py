"""Tests for variant config loading and the module catalog."""
import pytest

from core.config import (
    DEFAULT_CONFIG,
    VARIANTS_DIR,
    ConfigError,
    list_variants,
    load_config,
    parse_config,
    variant_choices,
)
from core.layout import expand
from core.registry import Catalog, load_catalog
from core.types import Block, CatalogEntry, ModuleInstance

DEFAULT_TAGS = [
    "vitals", "ecg", "labs", "pk", "physical_exam", "neuro_exam", "imaging", "procedure",
    "ip_accountability", "notes", "next_appointment", "attachments", "consent", "eligibility",
]
VISIT_ONLY_TAGS = ["screening", "baseline", "con_meds", "adverse_events", "randomization", "deviation", "ad_hoc"]


class TestConfig:
    """Variant configs parse into an AppConfig."""

    def test_default_variant(self, cfg):
        assert cfg.brand == "Research Source Consulting"
        assert cfg.version == "v1.2"
        assert cfg.header_keys == ["title", "site", "pi", "subject_id", "initials", "visit", "visit_date"]
        dates = [h.key for h in cfg.header if h.kind == "date"]
        assert dates == ["visit_date"]

    def test_visit_variant_adds_header_fields(self, visit_cfg):
        assert "protocol" in visit_cfg.header_keys
        assert "visit_time" in visit_cfg.header_keys
        assert "staff" in visit_cfg.header_keys
        assert visit_cfg.filename_field == "protocol"

    def test_list_variants(self):
        variants = list_variants()
        assert "default" in variants
        assert "visit" in variants

    def test_variant_choices_default(self, monkeypatch):
        monkeypatch.delenv("SOURCE_BUILDER_CONFIG", raising=False)
        choices, current = variant_choices()
        assert choices[current] == "default"
        assert current == str(DEFAULT_CONFIG.resolve())

    def test_variant_choices_env_keeps_default_selectable(self, monkeypatch):
        visit = VARIANTS_DIR / "visit.toml"
        monkeypatch.setenv("SOURCE_BUILDER_CONFIG", str(visit))
        choices, current = variant_choices()
        assert current == str(visit.resolve())
        assert choices[current] == "visit"
        assert choices[str(DEFAULT_CONFIG.resolve())] == "default"

    def test_variant_choices_env_outside_variants(self, tmp_path, monkeypatch):
        p = tmp_path / "site_a.toml"
        p.write_text("", encoding="utf-8")
        monkeypatch.setenv("SOURCE_BUILDER_CONFIG", str(p))
        choices, current = variant_choices()
        assert choices[current] == "site_a"
        assert "default" in choices.values()

    def test_clean_fields_drops_unknown_keys(self, cfg):
        clean = cfg.clean_fields({"title": "ABC", "bogus": "x", "site": None})
        assert set(clean) == set(cfg.header_keys)
        assert clean["title"] == "ABC"
        assert clean["site"] == ""
        assert "bogus" not in clean

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.toml")

    def test_bad_toml(self, tmp_path):
        p = tmp_path / "bad.toml"
        p.write_text("[app\nname=", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(p)

    def test_duplicate_header_keys(self):
        raw = {"header": [{"key": "a"}, {"key": "a"}], "modules": {"notes": {}}}
        with pytest.raises(ConfigError):
            parse_config(raw)

    def test_unknown_header_kind(self):
        raw = {"header": [{"key": "a", "kind": "number"}], "modules": {"notes": {}}}
        with pytest.raises(ConfigError):
            parse_config(raw)

    def test_no_modules(self):
        with pytest.raises(ConfigError):
            parse_config({"header": [{"key": "title"}]})

    @pytest.mark.parametrize("raw", [
        {"header": [{"key": "title", "column": "left"}], "modules": {"notes": {}}},
        {"header": "title", "modules": {"notes": {}}},
        {"header": ["title"], "modules": {"notes": {}}},
        {"header": [{"key": "title"}], "modules": {"notes": 1}},
        {"header": [{"key": "title"}], "modules": ["notes"]},
        {"header": [{"key": "title"}], "modules": {"notes": {"order": 1}, "labs": {"order": "2"}}},
        {"app": "Source Builder", "header": [{"key": "title"}], "modules": {"notes": {}}},
    ])
    def test_malformed_shapes_raise_config_error(self, raw):
        with pytest.raises(ConfigError):
            parse_config(raw)

    def test_malformed_file_raises_config_error(self, tmp_path):
        p = tmp_path / "odd.toml"
        p.write_text('[[header]]\nkey = "title"\ncolumn = "left"\n\n[modules.notes]\norder = 1\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(p)

    def test_env_override(self, tmp_path, monkeypatch):
        p = tmp_path / "mini.toml"
        p.write_text(
            '[app]\nbrand = "Mini"\n\n[[header]]\nkey = "title"\n\n[modules.notes]\norder = 1\n',
            encoding="utf-8",
        )
        monkeypatch.setenv("SOURCE_BUILDER_CONFIG", str(p))
        cfg = load_config()
        assert cfg.brand == "Mini"
        assert len(load_catalog(cfg)) == 1


class TestCatalog:
    """The catalog is built from the enabled modules in config order."""

    def test_default_catalog_order(self, catalog):
        assert [e.tag for e in catalog] == DEFAULT_TAGS

    def test_visit_catalog_has_all_modules(self, visit_catalog):
        tags = [e.tag for e in visit_catalog]
        for tag in DEFAULT_TAGS + VISIT_ONLY_TAGS:
            assert tag in tags
        assert len(tags) == 21

    def test_label_override(self, visit_catalog, catalog):
        assert visit_catalog.get("vitals").label == "Vital Signs"
        assert catalog.get("vitals").label == "Vitals (°C/°F, HR, BP, etc.)"

    def test_repeatable_flags(self, visit_catalog):
        repeatable = {e.tag for e in visit_catalog if e.repeatable}
        assert repeatable == {"vitals", "ecg", "con_meds", "adverse_events"}

    def test_every_entry_renders(self, visit_catalog):
        for entry in visit_catalog:
            inst = ModuleInstance(id="x", tag=entry.tag, title=entry.label, repeat_count=1 if entry.repeatable else None)
            pieces = list(expand(entry, inst))
            assert pieces, entry.tag
            assert all(p.text or p.columns for p in pieces)

    def test_repeatable_entries_have_repeat_block(self, visit_catalog):
        for entry in visit_catalog:
            has_repeat = any(b.kind == "repeat" for b in entry.blocks)
            assert has_repeat == entry.repeatable, entry.tag

    def test_fields_come_from_field_blocks(self, catalog):
        assert catalog.get("consent").fields == (("icf_version", "ICF Version/Date"), ("irb", "IRB"))
        assert catalog.get("labs").fields == ()

    def test_options_and_membership(self, catalog):
        opts = catalog.options()
        assert opts[0] == ("vitals", "Vitals (°C/°F, HR, BP, etc.)")
        assert "ecg" in catalog
        assert "screening" not in catalog
        assert catalog.get("screening") is None

    def test_disabled_module_skipped(self, cfg):
        raw_modules = dict(cfg.modules)
        raw_modules["pk"] = {"order": 4, "enabled": False}
        trimmed = parse_config(
            {"header": [{"key": h.key} for h in cfg.header], "modules": raw_modules},
        )
        assert "pk" not in load_catalog(trimmed)

    def test_unknown_module_in_config(self):
        cfg = parse_config({"header": [{"key": "title"}], "modules": {"teleporter": {}}})
        with pytest.raises(ConfigError):
            load_catalog(cfg)

    def test_duplicate_entry_rejected(self):
        e = CatalogEntry(tag="notes", label="Notes", repeatable=False, blocks=(Block.para("x"),))
        with pytest.raises(ConfigError):
            Catalog([e, e])
