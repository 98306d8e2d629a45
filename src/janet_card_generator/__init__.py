"""Janet Card Generator Package."""

__version__ = "0.1.0"

from janet_card_generator.core import CardGenerator
from janet_card_generator.exceptions import (
    CardGeneratorError,
    TemplateFileError,
    TemplateNotFoundError,
)
from janet_card_generator.models import CardData, Template
from janet_card_generator.templates import TemplateRegistry, default_registry

__all__ = [
    "CardGenerator",
    "CardData",
    "CardGeneratorError",
    "Template",
    "TemplateFileError",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "default_registry",
]
