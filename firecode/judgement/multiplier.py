"""Area multiplier derived from structure and interior finish."""

from __future__ import annotations

from dataclasses import dataclass

from firecode.models.building import FinishType, StructureType


@dataclass(frozen=True)
class AreaMultiplier:
    """Scaling factor applied to area thresholds, with its justification."""

    factor: int = 1
    description: str = ""

    def scale(self, threshold: float) -> float:
        return threshold * self.factor


def area_multiplier(
    structure_type: StructureType | None,
    finish_type: FinishType | None,
) -> AreaMultiplier:
    """Return the multiplier for a structure / finish combination.

    - structure A with retardant finish: 3x
    - structure A with any other finish, or structure B with retardant finish: 2x
    - everything else: 1x
    """
    retardant = finish_type == FinishType.RETARDANT
    if structure_type == StructureType.A and retardant:
        return AreaMultiplier(
            3,
            " (Fire-resistant specified structure with retardant finish: area thresholds tripled.)",
        )
    if (structure_type == StructureType.A and not retardant) or (
        structure_type == StructureType.B and retardant
    ):
        return AreaMultiplier(2, " (Structure and finish conditions: area thresholds doubled.)")
    return AreaMultiplier()
