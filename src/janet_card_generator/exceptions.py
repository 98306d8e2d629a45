"""Exceptions raised by the card generator."""


class CardGeneratorError(Exception):
    """Base class for card generator errors."""


class TemplateNotFoundError(CardGeneratorError, KeyError):
    """Raised when a template name is not in the registry."""

    def __init__(self, template_name: str) -> None:
        self.template_name = template_name
        super().__init__(f"Template '{template_name}' not found")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class TemplateFileError(CardGeneratorError):
    """Raised when a template file cannot be read or is invalid."""
