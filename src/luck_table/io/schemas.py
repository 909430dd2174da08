# luck_table/io/schemas.py
from __future__ import annotations
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

Rarity = Literal["Common", "Rare", "Epic", "Legendary", "Mythic"]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

class OutcomeIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    odds: Annotated[float, Field(gt=0, allow_inf_nan=False)]
    rarity: Rarity

class PolicyIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    base: Optional[FiniteFloat] = None
    crate_bonus: Optional[Union[float, str]] = None  # 2.5 or "250%"
    luck_per_percent: Optional[Annotated[int, Field(gt=0)]] = None

class TableConfigIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    outcomes: Optional[Annotated[List[OutcomeIn], Field(min_length=1)]] = None
    multipliers: Optional[List[float]] = None
    player_luck: Optional[List[float]] = None
    policy: Optional[PolicyIn] = None
