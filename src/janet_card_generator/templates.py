"""Template registry and template file loading."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Optional

import yaml
from pydantic import ValidationError

from janet_card_generator.exceptions import TemplateFileError, TemplateNotFoundError
from janet_card_generator.models import Template

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Read-only mapping of template names to templates.

    Names keep their registration order, which is the order used when
    listing templates.
    """

    def __init__(self, templates: Mapping[str, Template]) -> None:
        self._templates = MappingProxyType(dict(templates))

    def get(self, name: str) -> Template:
        """Look up a template by name.

        Raises:
            TemplateNotFoundError: If no template has that name
        """
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._templates)

    def items(self) -> list[tuple[str, Template]]:
        return list(self._templates.items())

    def merged_with(self, templates: Mapping[str, Template]) -> "TemplateRegistry":
        """Return a new registry with ``templates`` layered over this one."""
        combined = dict(self._templates)
        combined.update(templates)
        return TemplateRegistry(combined)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateRegistry({self.names()!r})"


def default_registry() -> TemplateRegistry:
    """Build the registry of built-in templates."""
    return TemplateRegistry(
        {
            "basic_unit": Template(
                cost=2,
                movement="(std/plus 1)",
                attack="(std/plus 1)",
                movement_points=2,
                attack_strength=2,
                defense=2,
                abilities=(),
                card_image="assets/default.png",
            ),
            "ranged_unit": Template(
                cost=2,
                movement="(std/plus 1)",
                attack="(array/join (std/plus 1) (std/plus 2))",
                movement_points=2,
                attack_strength=2,
                defense=1,
                abilities=(),
                card_image="assets/default.png",
            ),
            "heavy_unit": Template(
                cost=3,
                movement="(std/plus 1)",
                attack="(std/plus 1)",
                movement_points=1,
                attack_strength=3,
                defense=3,
                abilities=(),
                card_image="assets/default.png",
            ),
            "support_unit": Template(
                cost=2,
                movement="(std/plus 1)",
                attack="@[]",
                movement_points=2,
                attack_strength=0,
                defense=2,
                abilities=("heal",),
                card_image="assets/default.png",
            ),
            "structure": Template(
                cost=1,
                movement="@[]",
                attack="(std/cross 2)",
                movement_points=0,
                attack_strength=2,
                defense=3,
                abilities=(),
                card_image="assets/default.png",
            ),
        }
    )


def load_template_file(path: Path) -> dict[str, Template]:
    """Load extra templates from a YAML file.

    The file must hold a mapping of template name to a mapping of field
    values using the hyphenated field names, e.g.::

        scout:
          cost: 1
          movement-points: 3

    Args:
        path: Path to the YAML file

    Returns:
        Templates keyed by name, in file order

    Raises:
        TemplateFileError: If the file is unreadable or invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise TemplateFileError(f"Cannot read template file {path}: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise TemplateFileError(f"Template file {path} must contain a mapping")

    templates = {}
    for name, fields in document.items():
        try:
            templates[str(name)] = Template.model_validate(fields or {})
        except ValidationError as e:
            raise TemplateFileError(
                f"Invalid template '{name}' in {path}: {e}"
            ) from e

    logger.debug(f"Loaded {len(templates)} template(s) from {path}")
    return templates


def build_registry(templates_file: Optional[Path] = None) -> TemplateRegistry:
    """Build the built-in registry, optionally extended from a file."""
    registry = default_registry()
    if templates_file is not None:
        registry = registry.merged_with(load_template_file(templates_file))
    return registry
