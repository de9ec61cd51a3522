import math
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

ABILITIES = ("str", "dex", "con", "int", "wis", "cha")


class AbilityScore(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base: int = 10
    bonus: int = 0
    temp_bonus: int = Field(default=0, alias="tempBonus")
    proficient: bool = False

    @property
    def score(self) -> int:
        return self.base + self.bonus + self.temp_bonus

    @property
    def modifier(self) -> int:
        return math.floor((self.score - 10) / 2)


class SheetOwner(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    picture: Optional[str] = None


class Sheet(BaseModel):
    """Character record owned by the sheet service."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    owner: Optional[SheetOwner] = None
    publicly_visible: bool = Field(default=True, alias="publiclyVisible")
    name: str
    species: Optional[str] = None
    character_class: Optional[str] = Field(default=None, alias="class")
    level: int = 1
    ability_scores: Dict[str, AbilityScore] = Field(default_factory=dict, alias="abilityScores")

    @property
    def proficiency_bonus(self) -> int:
        return math.ceil(self.level / 4) + 1

    def variables(self) -> Dict[str, int]:
        """Named numbers exposed to dice expressions, e.g. ``str``, ``dex.save``, ``pb``."""
        pb = self.proficiency_bonus
        values: Dict[str, int] = {"pb": pb}
        for ability, score in self.ability_scores.items():
            values[f"{ability}.base"] = score.base
            values[f"{ability}.bonus"] = score.bonus + score.temp_bonus
            values[f"{ability}.score"] = score.score
            values[f"{ability}.save"] = score.modifier + (pb if score.proficient else 0)
            values[ability] = score.modifier
        return values

    def to_storage(self) -> Dict:
        return self.model_dump(mode="json", by_alias=True)
