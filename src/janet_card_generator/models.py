"""Data models for card templates and card data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Merged, renderable record for a single card. Keys are the hyphenated
# field names used in the generated code; values are not validated.
CardData = dict[str, Any]

EVENT_NAMES = (
    "on-draw",
    "on-play",
    "on-discard",
    "on-ability",
    "on-turn-begin",
    "on-turn-end",
)

EMPTY_COLLECTION = "@[]"


class Template(BaseModel):
    """Immutable set of default field values for a card.

    Field defaults match the ``basic_unit`` template so partial template
    definitions loaded from files stay renderable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    cost: int = 2
    movement: str = "(std/plus 1)"
    attack: str = "(std/plus 1)"
    movement_points: int = Field(default=2, alias="movement-points")
    attack_strength: int = Field(default=2, alias="attack-strength")
    defense: int = 2
    abilities: tuple[str, ...] = ()
    card_image: str = Field(default="assets/default.png", alias="card-image")

    def defaults(self) -> CardData:
        """Return the template values as a fresh, mutable card data dict."""
        data = self.model_dump(by_alias=True)
        data["abilities"] = list(self.abilities)
        return data
