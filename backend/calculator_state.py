"""
Calculator state edits.

The form's state is a CalculationInput snapshot. Every edit returns a new
snapshot; the one passed in is never touched. Raw field text goes through
the same coercion as the schemas (see coercion.py).
"""

import uuid

from .coercion import parse_amount
from .config import settings as default_settings
from .schemas import CalculationInput, FixedCosts, Participant

COST_FIELDS = ("cost_a", "cost_b")


def initial_state(settings=None) -> CalculationInput:
    """Zero costs and N empty player rows with ids '1'..'N'."""
    settings = settings or default_settings
    return CalculationInput(
        fixed_costs=FixedCosts(),
        participants=tuple(
            Participant(id=str(i + 1))
            for i in range(settings.DEFAULT_PARTICIPANT_SLOTS)
        ),
    )


def reset_state(settings=None) -> CalculationInput:
    """'Clear all' — back to a fresh calculation."""
    return initial_state(settings)


def has_participant(state: CalculationInput, participant_id: str) -> bool:
    return any(p.id == participant_id for p in state.participants)


def set_fixed_cost(state: CalculationInput, field: str, raw_value) -> CalculationInput:
    if field not in COST_FIELDS:
        raise ValueError(
            f"Unknown cost field: {field}. Available: {list(COST_FIELDS)}"
        )
    costs = state.fixed_costs.model_copy(update={field: parse_amount(raw_value)})
    return state.model_copy(update={"fixed_costs": costs})


def add_participant(state: CalculationInput) -> CalculationInput:
    new_row = Participant(id=uuid.uuid4().hex)
    return state.model_copy(update={"participants": state.participants + (new_row,)})


def remove_participant(state: CalculationInput, participant_id: str,
                       settings=None) -> CalculationInput:
    """
    Drop a player row. Removing the only remaining row resets the whole
    calculation to defaults rather than leaving an empty table.
    """
    if len(state.participants) <= 1:
        return initial_state(settings)
    remaining = tuple(p for p in state.participants if p.id != participant_id)
    return state.model_copy(update={"participants": remaining})


def _update_participant(state, participant_id, **changes):
    participants = tuple(
        Participant(**{**p.model_dump(), **changes}) if p.id == participant_id else p
        for p in state.participants
    )
    return state.model_copy(update={"participants": participants})


def rename_participant(state: CalculationInput, participant_id: str, name) -> CalculationInput:
    return _update_participant(state, participant_id, name=name)


def set_attendance(state: CalculationInput, participant_id: str, raw_value) -> CalculationInput:
    # Rebuilt through Participant(...) so the attendance validator coerces raw_value
    return _update_participant(state, participant_id, attendance_units=raw_value)
