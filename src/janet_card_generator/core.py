"""Core functionality for the Janet Card Generator."""

import logging
import random
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from janet_card_generator.config import settings
from janet_card_generator.renderer import merge, render, write_card
from janet_card_generator.templates import TemplateRegistry, default_registry

logger = logging.getLogger(__name__)

NAME_PREFIXES = [
    "Ancient",
    "Dark",
    "Light",
    "Fire",
    "Ice",
    "Storm",
    "Shadow",
    "Blood",
    "Iron",
    "Stone",
]

NAME_SUFFIXES = [
    "Warrior",
    "Mage",
    "Knight",
    "Archer",
    "Guardian",
    "Beast",
    "Dragon",
    "Spirit",
    "Golem",
]

# Inclusive ranges for randomized stats
COST_RANGE = (1, 5)
ATTACK_STRENGTH_RANGE = (1, 4)
DEFENSE_RANGE = (1, 3)
MOVEMENT_POINTS_RANGE = (0, 3)


class CardGenerator:
    """Generates Janet card files from templates."""

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        output_dir: Optional[Path] = None,
        extension: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the card generator.

        Args:
            registry: Templates to generate from (default: built-in templates)
            output_dir: Directory for generated files (default: settings.output_dir)
            extension: File extension (default: settings.file_extension)
            rng: Random source for random cards
        """
        self.registry = registry if registry is not None else default_registry()
        self.output_dir = Path(output_dir or settings.output_dir)
        self.extension = extension or settings.file_extension
        self.rng = rng or random.Random()
        logger.debug(
            f"Initializing CardGenerator ({len(self.registry)} templates, "
            f"output to {self.output_dir})"
        )

    def generate_card(
        self,
        name: str,
        template_name: str,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Path:
        """Generate a card file from a template.

        Args:
            name: The card name, used for the file name
            template_name: Name of the template to start from
            overrides: Field values replacing the template defaults

        Returns:
            Path to the written file

        Raises:
            TemplateNotFoundError: If the template does not exist
        """
        template = self.registry.get(template_name)
        card_data = merge(template, overrides)
        filepath = write_card(name, render(card_data), self.output_dir, self.extension)
        logger.debug(f"Generated {name!r} from {template_name!r}: {filepath}")
        return filepath

    def random_overrides(self) -> dict[str, int]:
        """Sample random stat overrides."""
        return {
            "cost": self.rng.randint(*COST_RANGE),
            "attack-strength": self.rng.randint(*ATTACK_STRENGTH_RANGE),
            "defense": self.rng.randint(*DEFENSE_RANGE),
            "movement-points": self.rng.randint(*MOVEMENT_POINTS_RANGE),
        }

    def random_name(self) -> str:
        """Build a random two-word card name."""
        return f"{self.rng.choice(NAME_PREFIXES)} {self.rng.choice(NAME_SUFFIXES)}"

    def generate_random_card(self, name: Optional[str] = None) -> Path:
        """Generate a card from a random template with random stats.

        Args:
            name: Card name (default: a random name)

        Returns:
            Path to the written file
        """
        name = name or self.random_name()
        template_name = self.rng.choice(self.registry.names())
        return self.generate_card(name, template_name, self.random_overrides())

    def generate_batch(self, count: int = 5) -> list[Path]:
        """Generate multiple random cards.

        Args:
            count: Number of cards to generate

        Returns:
            Paths of the written files, in generation order
        """
        logger.debug(f"Generating batch of {count} cards")
        return [self.generate_random_card() for _ in range(count)]
