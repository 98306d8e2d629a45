"""Pytest configuration and fixtures."""

import random
from pathlib import Path

import pytest
from janet_card_generator.core import CardGenerator
from janet_card_generator.templates import TemplateRegistry, default_registry


@pytest.fixture
def registry() -> TemplateRegistry:
    """Provide the built-in template registry."""
    return default_registry()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide a not yet existing output directory."""
    return tmp_path / "generated_cards"


@pytest.fixture
def card_generator(registry: TemplateRegistry, output_dir: Path) -> CardGenerator:
    """Provide a seeded CardGenerator writing into a temporary directory."""
    return CardGenerator(registry=registry, output_dir=output_dir, rng=random.Random(42))


@pytest.fixture
def templates_file(tmp_path: Path) -> Path:
    """Provide a YAML file with two extra templates."""
    path = tmp_path / "templates.yaml"
    path.write_text(
        "scout:\n"
        "  cost: 1\n"
        "  movement-points: 3\n"
        "  abilities: [stealth, scout]\n"
        "structure:\n"
        "  cost: 4\n"
        "  movement: '@[]'\n",
        encoding="utf-8",
    )
    return path
