"""Request and response models of the decision API.

The models mirror the decision core's snapshot types and convert to them, so
the routers never build core objects by hand.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from taiga.entities import AgentInfo, Cell, Grass, Health, LivingUnitInfo, Pregnancy, Sex, Species
from taiga.geo import Position
from taiga.visibility import Visibility


class PositionData(BaseModel):
    x: int
    y: int

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class GrassData(BaseModel):
    food_current: int = 0
    food_value: int = 1


class CellData(BaseModel):
    """A visible cell."""

    x: int
    y: int
    grass: GrassData = Field(default_factory=GrassData)
    scent: int = Field(default=0, ge=0)

    def to_cell(self) -> Cell:
        return Cell(
            Position(self.x, self.y),
            Grass(self.grass.food_current, self.grass.food_value),
            self.scent,
        )


class PregnancyData(BaseModel):
    progress: float = 0.0
    father_id: Optional[str] = None


class UnitData(BaseModel):
    """A perceived living unit."""

    id: str
    species: Species
    x: int
    y: int
    sex: Sex = Sex.MALE
    adult: bool = True
    pregnancy: Optional[PregnancyData] = None

    def _pregnancy(self) -> Optional[Pregnancy]:
        if self.pregnancy is None:
            return None
        return Pregnancy(self.pregnancy.progress, self.pregnancy.father_id)

    def to_unit(self) -> LivingUnitInfo:
        return LivingUnitInfo(
            unit_id=self.id,
            species=self.species,
            position=Position(self.x, self.y),
            sex=self.sex,
            adult=self.adult,
            pregnancy=self._pregnancy(),
        )


class AgentData(UnitData):
    """The deciding creature; its species comes from the URL."""

    species: Optional[Species] = None
    health: float = Field(default=1.0, ge=0.0, le=1.0)

    def to_agent(self, species: Species) -> AgentInfo:
        return AgentInfo(
            unit_id=self.id,
            species=species,
            position=Position(self.x, self.y),
            sex=self.sex,
            adult=self.adult,
            health=Health(self.health, 1.0),
            pregnancy=self._pregnancy(),
        )


class SnapshotRequest(BaseModel):
    """Agent plus the visibility snapshot it decides against."""

    agent: AgentData
    width: int
    height: int
    cells: List[CellData] = Field(default_factory=list)
    units: List[UnitData] = Field(default_factory=list)

    def to_visibility(self) -> Visibility:
        return Visibility.of(
            (cell.to_cell() for cell in self.cells),
            (unit.to_unit() for unit in self.units),
            self.width,
            self.height,
        )


class CellValue(BaseModel):
    x: int
    y: int
    value: int


class EvaluateResponse(BaseModel):
    values: List[CellValue]
    best: List[PositionData]


class MoveResponse(BaseModel):
    direction: Optional[str] = None
    target: Optional[PositionData] = None


class FeedResponse(BaseModel):
    """What the agent eats: grass on its cell or a visible unit."""

    eats: bool
    unit_id: Optional[str] = None
    grass: Optional[GrassData] = None


class HealthResponse(BaseModel):
    status: str
    version: str
