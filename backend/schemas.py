from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator

from .coercion import parse_amount, parse_units


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    attendance_units: int = 0

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value):
        return "" if value is None else str(value)

    @field_validator("attendance_units", mode="before")
    @classmethod
    def _coerce_units(cls, value):
        return parse_units(value)


class FixedCosts(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost_a: float = 0.0  # venue / court
    cost_b: float = 0.0  # consumables / shuttle box

    @field_validator("cost_a", "cost_b", mode="before")
    @classmethod
    def _coerce_cost(cls, value):
        return parse_amount(value)


class CalculationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    fixed_costs: FixedCosts = FixedCosts()
    participants: Tuple[Participant, ...] = ()

    @model_validator(mode="after")
    def _unique_participant_ids(self):
        seen = set()
        for p in self.participants:
            if p.id in seen:
                raise ValueError(f"Duplicate participant id: {p.id}")
            seen.add(p.id)
        return self


class ParticipantCharge(BaseModel):
    model_config = ConfigDict(frozen=True)

    participant: Participant
    charge: int


class AllocationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_cost: float
    total_attendance_units: int
    rate_per_unit: int
    participant_charges: Tuple[ParticipantCharge, ...]
    total_charged: int

    @computed_field
    @property
    def rate_status(self) -> str:
        return "OK" if self.rate_per_unit > 0 else "-"


# --- Request/Response schemas ---

EditAction = Literal[
    "set_cost",
    "add_participant",
    "remove_participant",
    "rename_participant",
    "set_attendance",
    "reset",
]


class EditRequest(BaseModel):
    state: CalculationInput
    action: EditAction
    participant_id: Optional[str] = None
    field: Optional[str] = None
    value: Optional[Union[str, int, float]] = None  # raw field text


class EditResponse(BaseModel):
    state: CalculationInput
    result: AllocationResult


class SummaryResponse(BaseModel):
    summary: str
    share_url: str
