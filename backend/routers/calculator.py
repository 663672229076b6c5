"""
Calculator API — stateless wrappers around the allocation engine.

GET  /api/calculator/initial    — Fresh calculation (zero costs, empty rows)
POST /api/calculator/calculate  — Allocation for a posted snapshot
POST /api/calculator/summary    — Shareable summary text + messaging link
POST /api/calculator/edit       — Apply one form edit, return new snapshot + allocation

The browser owns the snapshot. Nothing is stored server-side.
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import calculator_state
from ..allocation_engine import compute_allocation
from ..schemas import (
    AllocationResult,
    CalculationInput,
    EditRequest,
    EditResponse,
    SummaryResponse,
)
from ..share import build_share_url
from ..summary_formatter import format_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculator", tags=["calculator"])

_PARTICIPANT_ACTIONS = ("remove_participant", "rename_participant", "set_attendance")


@router.get("/initial", response_model=CalculationInput)
def get_initial_state():
    return calculator_state.initial_state()


@router.post("/calculate", response_model=AllocationResult)
def calculate(calculation: CalculationInput):
    return compute_allocation(calculation)


@router.post("/summary", response_model=SummaryResponse)
def summary(calculation: CalculationInput):
    result = compute_allocation(calculation)
    text = format_summary(calculation, result)
    return SummaryResponse(summary=text, share_url=build_share_url(text))


@router.post("/edit", response_model=EditResponse)
def edit(request: EditRequest):
    """
    Apply a single edit.

    - set_cost: field ("cost_a" | "cost_b") + value
    - add_participant / reset: no extra params
    - remove_participant / rename_participant / set_attendance: participant_id (+ value)
    """
    state = request.state

    if request.action in _PARTICIPANT_ACTIONS:
        if not request.participant_id or not calculator_state.has_participant(
            state, request.participant_id
        ):
            raise HTTPException(status_code=404, detail="Participant not found")

    if request.action == "set_cost":
        try:
            new_state = calculator_state.set_fixed_cost(state, request.field, request.value)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    elif request.action == "add_participant":
        new_state = calculator_state.add_participant(state)
    elif request.action == "remove_participant":
        new_state = calculator_state.remove_participant(state, request.participant_id)
    elif request.action == "rename_participant":
        new_state = calculator_state.rename_participant(
            state, request.participant_id, "" if request.value is None else request.value
        )
    elif request.action == "set_attendance":
        new_state = calculator_state.set_attendance(
            state, request.participant_id, request.value
        )
    else:
        new_state = calculator_state.reset_state()

    logger.info(
        "Applied %s (participant=%s): %d rows",
        request.action, request.participant_id, len(new_state.participants),
    )
    return EditResponse(state=new_state, result=compute_allocation(new_state))
