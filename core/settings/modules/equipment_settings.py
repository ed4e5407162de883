from __future__ import annotations

from pydantic import Field

from core.domain.entities import EquipmentParameters
from core.settings.base import ScreenProducerBaseSettings


class EquipmentSettings(ScreenProducerBaseSettings):
    """
    Parameters of the screen machine model bought from suppliers.
    Seeded into storage on startup when none have been declared yet.
    """

    input_sand_kg: int = Field(1, ge=0, alias="EQUIPMENT_INPUT_SAND_KG")
    input_copper_kg: int = Field(1, ge=0, alias="EQUIPMENT_INPUT_COPPER_KG")
    output_screens_per_day: int = Field(500, ge=0, alias="EQUIPMENT_OUTPUT_SCREENS_PER_DAY")
    equipment_weight: int = Field(2000, gt=0, alias="EQUIPMENT_WEIGHT")

    def to_parameters(self) -> EquipmentParameters:
        return EquipmentParameters(
            input_sand_kg=self.input_sand_kg,
            input_copper_kg=self.input_copper_kg,
            output_screens_per_day=self.output_screens_per_day,
            equipment_weight=self.equipment_weight,
        )
