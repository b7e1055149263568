"""Building data model."""

from firecode.models.building import (
    BuildingProfile,
    ComponentUse,
    FinishType,
    FireResistance,
    Floor,
    FloorKind,
    OccupancyFeatures,
    ParkingInfo,
    StageLocation,
    StructureType,
)

__all__ = [
    "BuildingProfile",
    "ComponentUse",
    "FinishType",
    "FireResistance",
    "Floor",
    "FloorKind",
    "OccupancyFeatures",
    "ParkingInfo",
    "StageLocation",
    "StructureType",
]
