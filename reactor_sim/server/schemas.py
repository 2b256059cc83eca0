"""
Wire schemas for the reactor HTTP API.

Field aliases are the JSON names clients depend on.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, confloat, field_validator

from ..state import ReactorSnapshot


class ActionRequest(BaseModel):
    """Request to perform an operator action"""
    type: str = Field(strict=True)
    value: Optional[confloat(strict=True, allow_inf_nan=False)] = 0.0

    @field_validator("value")
    @classmethod
    def null_value_as_zero(cls, value: Optional[float]) -> float:
        return 0.0 if value is None else value


class FuelRodResponse(BaseModel):
    condition: float


class ReactorStateResponse(BaseModel):
    """Full reactor state as sent to clients"""
    model_config = ConfigDict(populate_by_name=True)

    is_powered_on: bool = Field(alias="isPoweredOn")
    is_auto_control: bool = Field(alias="isAutoControl")
    temperature: float
    fission_rate: float = Field(alias="fissionRate")
    turbine_output: float = Field(alias="turbineOutput")
    power_output: float = Field(alias="powerOutput")
    power_load: float = Field(alias="powerLoad")
    fuel_rod: Optional[FuelRodResponse] = Field(alias="fuelRod")
    status: int

    @classmethod
    def from_snapshot(cls, snapshot: ReactorSnapshot) -> "ReactorStateResponse":
        fuel_rod = None
        if snapshot.fuel_rod is not None:
            fuel_rod = FuelRodResponse(condition=snapshot.fuel_rod.condition)
        return cls(
            is_powered_on=snapshot.is_powered_on,
            is_auto_control=snapshot.is_auto_control,
            temperature=snapshot.temperature,
            fission_rate=snapshot.fission_rate,
            turbine_output=snapshot.turbine_output,
            power_output=snapshot.power_output,
            power_load=snapshot.power_load,
            fuel_rod=fuel_rod,
            status=int(snapshot.status),
        )


def serialize_snapshot(snapshot: ReactorSnapshot) -> str:
    """Snapshot as compact JSON text"""
    return ReactorStateResponse.from_snapshot(snapshot).model_dump_json(by_alias=True)
