# ============================================================
# uigen/generate/instructions.py
# ------------------------------------------------------------
# Composes the guiding instruction sent ahead of the prompt.
# The instruction is an ordered list of named sections; each
# section decides whether it is included for a given flag and
# how it renders. Output is deterministic for (flag, catalog).
# ============================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from uigen.catalog import CatalogEntry
from . import prompts
from .examples import EXAMPLES, FewShot


@dataclass(frozen=True)
class InstructionSection:
    name: str
    render: Callable[[Sequence[CatalogEntry]], str]
    include: Callable[[bool], bool] = lambda include_catalog: True


def _static(text: str) -> Callable[[Sequence[CatalogEntry]], str]:
    return lambda catalog: text


def render_catalog_entry(entry: CatalogEntry) -> str:
    return prompts.CATALOG_ENTRY_TEMPLATE.format(
        name=entry.name,
        import_instructions=entry.import_instructions,
        usage_instructions=entry.usage_instructions,
    )


def _render_catalog(catalog: Sequence[CatalogEntry]) -> str:
    blocks = "\n".join(render_catalog_entry(e) for e in catalog)
    return f"{prompts.CATALOG_INTRO}\n{blocks}\n"


def render_example(example: FewShot) -> str:
    if example.prompt is None:
        return example.code
    return prompts.EXAMPLE_TEMPLATE.format(prompt=example.prompt, code=example.code)


def _render_examples(catalog: Sequence[CatalogEntry]) -> str:
    lead, *more = EXAMPLES
    parts = [prompts.EXAMPLE_INTRO, render_example(lead), prompts.EXAMPLE_MORE]
    parts += [render_example(e) for e in more]
    parts.append(prompts.EXAMPLE_NOTES)
    return "\n".join(p.strip("\n") + "\n" for p in parts)


def _render_errors(catalog: Sequence[CatalogEntry]) -> str:
    errors = "\n\n".join(prompts.ERROR_PATTERN_TEMPLATE.format(error=e) for e in prompts.ERROR_PATTERNS)
    return f"{prompts.ERROR_PATTERNS_INTRO}\n{errors}\n"


SECTIONS: List[InstructionSection] = [
    InstructionSection("role", _static(prompts.ROLE)),
    InstructionSection("rules", _static(prompts.RULES)),
    InstructionSection("imports", _static(prompts.IMPORT_RULES)),
    InstructionSection("icons", _static(prompts.ICON_RULES)),
    InstructionSection("example", _render_examples),
    InstructionSection("errors", _render_errors),
    InstructionSection("size", _static(prompts.SIZE_RULES)),
    InstructionSection("catalog", _render_catalog, include=lambda include_catalog: include_catalog),
    InstructionSection("libraries", _static(prompts.LIBRARIES)),
]


def active_sections(include_catalog: bool) -> List[str]:
    """Names of the sections rendered for the given flag, in order."""
    return [s.name for s in SECTIONS if s.include(include_catalog)]


def compose_instruction(include_catalog: bool, catalog: Sequence[CatalogEntry] = ()) -> str:
    """Build the system instruction. Pure: no I/O, same input -> same text."""
    parts = [
        s.render(catalog).strip("\n")
        for s in SECTIONS
        if s.include(include_catalog)
    ]
    return "\n\n".join(parts) + "\n"
