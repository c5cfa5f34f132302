from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Optional

Rarity = Literal["Common", "Rare", "Epic", "Legendary", "Champion"]


class IconUrls(BaseModel):
    model_config = ConfigDict(extra="allow")

    medium: Optional[str] = None


class Card(BaseModel):
    # Documentation only: upstream records are passed through untouched,
    # including fields not listed here.
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    elixirCost: Optional[int] = None
    iconUrls: IconUrls
    rarity: Rarity
    hitpoints: Optional[int] = None
    damage: Optional[int] = None


class CardsResponse(BaseModel):
    cards: List[Card]


class ErrorMessage(BaseModel):
    message: str
