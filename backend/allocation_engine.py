"""
Allocation engine — splits the fixed costs by attendance.

Pure math. No I/O, no state. Court + shuttle pooled, divided by total
sessions played, rounded to a whole per-session rate, then multiplied back
out per player.

Input: CalculationInput (costs + ordered participants)
Output: AllocationResult (rate, per-player charges, totals)

Each charge is rounded independently, so total_charged can miss total_cost
by a few rupees (100 over 3 sessions -> 33/session -> 99 collected). That
residue is expected and is never redistributed.
"""

import logging

from .currency import round_half_up, round_half_up_ratio
from .schemas import AllocationResult, CalculationInput, ParticipantCharge

logger = logging.getLogger(__name__)


def compute_allocation(calculation: CalculationInput) -> AllocationResult:
    costs = calculation.fixed_costs
    participants = calculation.participants

    total_cost = costs.cost_a + costs.cost_b
    total_units = sum(p.attendance_units for p in participants)

    # Nobody has played yet — rate is 0, not an error
    if total_units > 0:
        rate = round_half_up_ratio(total_cost, total_units)
    else:
        rate = 0

    charges = tuple(
        ParticipantCharge(participant=p, charge=round_half_up(p.attendance_units * rate))
        for p in participants
    )
    total_charged = sum(c.charge for c in charges)

    logger.debug(
        "Allocated %.2f over %d units: rate=%d charged=%d",
        total_cost, total_units, rate, total_charged,
    )

    return AllocationResult(
        total_cost=total_cost,
        total_attendance_units=total_units,
        rate_per_unit=rate,
        participant_charges=charges,
        total_charged=total_charged,
    )
