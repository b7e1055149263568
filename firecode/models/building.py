"""BuildingProfile: the immutable description of the building under judgement.

Profiles are assembled by the caller from collected form input, which is
assumed to be range-validated already.  Missing numeric values stay ``None``
on the model and are coalesced to ``0`` by the derived accessors.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FloorKind(str, Enum):
    """Whether a floor is above or below grade."""

    GROUND = "ground"
    BASEMENT = "basement"


class StructureType(str, Enum):
    """Main structural part classification used by the area multiplier."""

    A = "A"
    """Specified main structural parts of fire-resistant construction."""

    B = "B"
    """Fire-resistant or quasi-fire-resistant construction (other)."""

    C = "C"
    """Other construction."""


class FinishType(str, Enum):
    """Interior finish of walls and ceilings."""

    RETARDANT = "retardant"
    OTHER = "other"


class FireResistance(str, Enum):
    """Fire-resistance grade of the whole building."""

    FIRE_RESISTANT = "fire_resistant"
    QUASI_FIRE_RESISTANT = "quasi_fire_resistant"
    OTHER = "other"


class StageLocation(str, Enum):
    """Where a stage area sits within the building."""

    RESTRICTED = "restricted"
    """Basement, windowless floor, or 4th floor and above."""

    OTHER = "other"


class ComponentUse(BaseModel):
    """One tenant-use slice of one floor of a composite-use building."""

    model_config = ConfigDict(frozen=True)

    use_code: str | None = None
    floor_area: float | None = None
    occupant_capacity: int | None = None


class Floor(BaseModel):
    """A single storey."""

    model_config = ConfigDict(frozen=True)

    level: int
    kind: FloorKind = FloorKind.GROUND
    floor_area: float | None = None
    occupant_capacity: int | None = None
    is_windowless: bool = False
    component_uses: tuple[ComponentUse, ...] = ()
    """Populated only when the building's use code is a composite use."""

    @property
    def is_basement(self) -> bool:
        return self.kind == FloorKind.BASEMENT

    @property
    def is_ground(self) -> bool:
        return self.kind == FloorKind.GROUND

    @property
    def area(self) -> float:
        return self.floor_area or 0

    @property
    def capacity(self) -> int:
        return self.occupant_capacity or 0

    @property
    def label(self) -> str:
        """Short name used in messages, e.g. ``'B1'`` or ``'3F'``."""
        if self.is_basement:
            return f"B{self.level}"
        return f"{self.level}F"


class ParkingInfo(BaseModel):
    """Parking areas inside the building."""

    model_config = ConfigDict(frozen=True)

    exists: bool = False
    rooftop_area: float | None = None
    basement_or_upper_area: float | None = None
    first_floor_area: float | None = None
    can_all_vehicles_exit_simultaneously: bool = False
    mechanical_present: bool = False
    mechanical_capacity: int | None = None


class OccupancyFeatures(BaseModel):
    """Hazard and feature flags that describe the building as a whole.

    None of these can be attributed to an individual tenant of a composite
    building, so synthesized sub-profiles carry the defaults.
    """

    model_config = ConfigDict(frozen=True)

    uses_fire_equipment: bool = False
    stores_minor_hazardous_materials: bool = False
    designated_combustibles_multiple: float = 0
    """Stored designated combustibles as a multiple of the standard quantity."""

    has_lodging: bool = False
    is_specified_one_staircase: bool = False
    is_care_dependent_occupancy: bool = False
    has_beds: bool = False

    has_stage_area: bool = False
    stage_area: float | None = None
    stage_location: StageLocation | None = None

    is_rack_warehouse: bool = False
    ceiling_height: float | None = None

    has_helicopter_landing_zone: bool = False
    has_high_fire_usage_area_over_200: bool = False
    has_electrical_equipment_over_200: bool = False
    has_telecom_room_over_500: bool = False

    has_car_repair_area: bool = False
    car_repair_area_basement_or_upper: float | None = None
    car_repair_area_first_floor: float | None = None

    has_road_part: bool = False
    road_part_rooftop_area: float | None = None
    road_part_other_area: float | None = None

    parking: ParkingInfo = Field(default_factory=ParkingInfo)

    has_hot_spring_facility: bool = False
    is_hot_spring_facility_confirmed: bool = False

    has_multiple_buildings_on_site: bool = False
    contracted_current_capacity: float | None = None
    """Contracted electrical current in amperes."""


class BuildingProfile(BaseModel):
    """Immutable input to every article judgement."""

    model_config = ConfigDict(frozen=True)

    use_code: str | None = None
    total_floor_area: float | None = None
    ground_floors: int = 0
    basement_floors: int = 0
    total_capacity: int | None = None
    site_area: float | None = None
    building_height: float | None = None
    floors: tuple[Floor, ...] = ()

    # Structural attributes, shared by every part of the building
    structure_type: StructureType | None = None
    finish_type: FinishType | None = None
    fire_resistance: FireResistance | None = None
    has_special_combustible_structure: bool = False
    has_fire_suppressing_structure: bool = False

    features: OccupancyFeatures = Field(default_factory=OccupancyFeatures)

    # -- Derived values ------------------------------------------------------

    @property
    def total_area(self) -> float:
        return self.total_floor_area or 0

    @property
    def capacity(self) -> int:
        return self.total_capacity or 0

    @property
    def basement_area(self) -> float:
        return sum(f.area for f in self.floors if f.is_basement)

    @property
    def windowless_area(self) -> float:
        return sum(f.area for f in self.floors if f.is_windowless)

    @property
    def basement_or_windowless_area(self) -> float:
        return sum(f.area for f in self.floors if f.is_basement or f.is_windowless)

    @property
    def basement_or_windowless_capacity(self) -> int:
        return sum(f.capacity for f in self.floors if f.is_basement or f.is_windowless)

    @property
    def has_basement_or_windowless_floors(self) -> bool:
        return any(f.is_basement or f.is_windowless for f in self.floors)

    @property
    def storeys_above_ground(self) -> int:
        """Number of ground floors actually described in ``floors``."""
        return sum(1 for f in self.floors if f.is_ground)

    def upper_floor_area(self, min_level: int) -> float:
        """Total area of ground floors at *min_level* and above."""
        return sum(f.area for f in self.floors if f.is_ground and f.level >= min_level)

    def ground_floor(self, level: int) -> Floor | None:
        """Return the ground floor at *level*, if described."""
        for floor in self.floors:
            if floor.is_ground and floor.level == level:
                return floor
        return None

    def stores_designated_combustibles_over(self, multiple: float) -> bool:
        """True if designated combustibles reach *multiple* x the standard quantity."""
        stored = self.features.designated_combustibles_multiple
        return stored > 0 and stored >= multiple

    def first_two_floors_area(self) -> float:
        """Area of the 1st floor, plus the 2nd floor when there are two or more storeys."""
        if self.ground_floors < 1:
            return 0
        levels = (1, 2) if self.ground_floors >= 2 else (1,)
        return sum(f.area for f in self.floors if f.is_ground and f.level in levels)
