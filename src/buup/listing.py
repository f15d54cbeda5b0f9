"""
Categorized views over the registry.

These are derived on every call; nothing here holds state of its own.
"""

from __future__ import annotations

from buup.registry import TransformerRegistry, get_registry
from buup.types import CATEGORY_ORDER, TransformerCategory, TransformerInfo

ID_COLUMN_WIDTH = 20

Listing = list[tuple[TransformerCategory, list[TransformerInfo]]]


def categorized_listing(registry: TransformerRegistry | None = None) -> Listing:
    """
    Group transformer metadata by category.

    Parameters
    ----------
    registry : TransformerRegistry, optional
        Registry to list; the process-wide one by default.

    Returns
    -------
    list[tuple[TransformerCategory, list[TransformerInfo]]]
        One entry per category in display order (empty categories included),
        each with its transformers sorted by id.
    """
    registry = registry if registry is not None else get_registry()
    grouped = registry.by_category()
    return [(category, [transformer.info() for transformer in grouped[category]]) for category in CATEGORY_ORDER]


def render_listing(listing: Listing) -> str:
    """
    Render a listing as plain text for the command line.

    Empty categories are skipped. Each category is introduced by its
    upper-cased label and followed by ``  <id> - <description>`` lines.
    """
    blocks = []
    for category, infos in listing:
        if not infos:
            continue
        lines = [f"{category.label.upper()}:"]
        lines.extend(f"  {info.id:<{ID_COLUMN_WIDTH}} - {info.description}" for info in infos)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def selector_choices(registry: TransformerRegistry | None = None) -> list[tuple[str, str]]:
    """
    Build ``(label, id)`` choices for a dropdown.

    Returns
    -------
    list[tuple[str, str]]
        Labels of the form ``"Category / Title"``, grouped in display order.
    """
    return [
        (f"{category.label} / {info.title}", info.id)
        for category, infos in categorized_listing(registry)
        for info in infos
    ]
