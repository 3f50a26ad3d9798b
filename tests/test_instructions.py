# ===============================================
# tests/test_instructions.py
# Instruction composer: sections, catalog blocks,
# determinism.
# ===============================================

from uigen.catalog import CatalogEntry, load_catalog
from uigen.generate.instructions import SECTIONS, active_sections, compose_instruction
from uigen.generate.examples import EXAMPLES
from uigen.generate.prompts import ERROR_PATTERNS, ICON_ALLOWLIST, MAX_LINES

CATALOG = (
    CatalogEntry("Zeta", 'import { Zeta } from "@/components/ui/zeta"', "<Zeta />"),
    CatalogEntry("Alpha", 'import { Alpha } from "@/components/ui/alpha"', "<Alpha />"),
    CatalogEntry("Mid", 'import { Mid } from "@/components/ui/mid"', "<Mid />"),
)


def test_without_catalog_has_no_component_blocks():
    text = compose_instruction(False, CATALOG)
    assert "<component>" not in text
    assert "Zeta" not in text


def test_with_catalog_has_one_block_per_entry_in_order():
    text = compose_instruction(True, CATALOG)
    assert text.count("<component>") == len(CATALOG)
    positions = [text.index(f"<name>\n{e.name}\n</name>") for e in CATALOG]
    assert positions == sorted(positions)


def test_catalog_block_carries_import_and_usage():
    text = compose_instruction(True, CATALOG[:1])
    assert '<import-instructions>\nimport { Zeta } from "@/components/ui/zeta"\n</import-instructions>' in text
    assert "<usage-instructions>\n<Zeta />\n</usage-instructions>" in text


def test_compose_is_deterministic():
    assert compose_instruction(True, CATALOG) == compose_instruction(True, CATALOG)
    assert compose_instruction(False, CATALOG) == compose_instruction(False, CATALOG)


def test_flag_true_is_superset_of_flag_false():
    base = active_sections(False)
    full = active_sections(True)
    assert set(base) < set(full)
    assert [s for s in full if s in base] == base

    plain = compose_instruction(False, CATALOG)
    with_catalog = compose_instruction(True, CATALOG)
    for paragraph in plain.strip().split("\n\n"):
        assert paragraph in with_catalog


def test_empty_catalog_renders_intro_only():
    text = compose_instruction(True, ())
    assert "prestyled components" in text
    assert "<component>" not in text


def test_contract_rules_are_present():
    text = compose_instruction(False)
    assert f"under {MAX_LINES} lines" in text
    for icon in ICON_ALLOWLIST:
        assert icon in text
    assert "default export" in text
    assert '"@/components/ui/button"' in text
    assert text.rstrip().endswith("NO OTHER LIBRARIES (e.g. zod, hookform) ARE INSTALLED OR ABLE TO BE IMPORTED.")


def test_sections_have_unique_names():
    names = [s.name for s in SECTIONS]
    assert len(names) == len(set(names))


def test_bundled_catalog_composes():
    catalog = load_catalog()
    text = compose_instruction(True, catalog)
    assert text.count("<component>") == len(catalog)


def test_every_example_is_rendered_in_order():
    text = compose_instruction(False)
    positions = []
    for example in EXAMPLES:
        head = example.code.splitlines()[0] if example.prompt is None else f'prompt: "{example.prompt}"'
        assert head in text
        positions.append(text.index(head))
    assert positions == sorted(positions)
    assert len(EXAMPLES) == 8
    assert "export default function HealthcareLandingPage()" in text


def test_sandbox_error_patterns_are_quoted():
    text = compose_instruction(False)
    assert text.count("Something went wrong") == len(ERROR_PATTERNS)
    assert "Element type is invalid" in text
    assert "Could not find module in path: '@/components/ui/button'" in text
    assert active_sections(False).index("errors") == active_sections(False).index("example") + 1


def test_import_rules_show_wrong_barrel_paths():
    text = compose_instruction(False)
    assert 'import { Avatar, AvatarImage, AvatarFallback } from "@/components/ui/avatar"' in text
    assert 'import { Button, Card, CardContent } from "/components/ui"' in text
