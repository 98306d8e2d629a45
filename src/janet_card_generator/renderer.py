"""Rendering of card data into Janet source files."""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from janet_card_generator.models import EMPTY_COLLECTION, EVENT_NAMES, CardData, Template

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".janet"

_WHITESPACE = re.compile(r"\s+")


def merge(template: Template, overrides: Optional[Mapping[str, Any]] = None) -> CardData:
    """Merge overrides on top of a template's defaults.

    Only top-level keys are replaced. Keys the renderer does not know
    about are kept and ignored at render time.

    Args:
        template: The template providing default values
        overrides: Field values replacing the template's

    Returns:
        A new card data dict
    """
    card_data = template.defaults()
    card_data.update(overrides or {})
    return card_data


def format_event_handler(handler: Any) -> str:
    """Format an event handler value as Janet code.

    Strings are code fragments and are emitted as is. Lists of fragments
    become an array literal with the fragments separated by spaces.
    """
    if isinstance(handler, str):
        return handler
    if isinstance(handler, (list, tuple)):
        return f"@[{' '.join(str(fragment) for fragment in handler)}]"
    return EMPTY_COLLECTION


def _format_abilities(abilities: Any) -> str:
    if not abilities:
        return EMPTY_COLLECTION
    quoted = (json.dumps(str(name), ensure_ascii=False) for name in abilities)
    return "@[" + ", ".join(quoted) + "]"


def render(card_data: CardData) -> list[str]:
    """Render card data as lines of Janet code.

    Args:
        card_data: Merged card data

    Returns:
        The lines of the card definition, ending with a blank line
    """
    lines = [
        f"(def cost {card_data['cost']})",
        f'(def card-image "{card_data["card-image"]}")',
        "",
        f"(def movement {card_data['movement']})",
        f"(def movement-points {card_data['movement-points']})",
        "",
        f"(def attack {card_data['attack']})",
        "",
        f"(def abilities {_format_abilities(card_data['abilities'])})",
        "",
        f"(def attack-strength {card_data['attack-strength']})",
        f"(def defense {card_data['defense']})",
        "",
    ]

    for event in EVENT_NAMES:
        handler = card_data.get(event)
        value = format_event_handler(handler) if handler else EMPTY_COLLECTION
        lines.append(f"(def {event} {value})")

    lines.append("")
    return lines


def card_filename(name: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Derive the output file name for a card.

    Example:
        >>> card_filename("Fire  Mage")
        'fire_mage.janet'
    """
    return _WHITESPACE.sub("_", name.lower()) + extension


def write_card(
    name: str,
    lines: list[str],
    output_dir: Path,
    extension: str = DEFAULT_EXTENSION,
) -> Path:
    """Write rendered lines to the card's file, replacing any existing one.

    Args:
        name: The card name the file name is derived from
        lines: Rendered lines
        output_dir: Directory to write into, created if missing
        extension: File extension, including the dot

    Returns:
        Path to the written file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / card_filename(name, extension)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    logger.debug(f"Wrote {len(lines)} lines to {filepath}")
    return filepath
