"""
Shareable session summary — the text block players paste into the group chat.

Blank rows with zero sessions are placeholders: they're left out of the
breakdown but were already counted in the totals (they contribute 0).
Unnamed players who did attend get a positional "Player N" label, numbered
among the listed players only.
"""

from .config import settings as default_settings
from .currency import format_currency
from .schemas import AllocationResult, CalculationInput

SEPARATOR = "--------------------------------"


def _is_listed(charge) -> bool:
    p = charge.participant
    return p.attendance_units > 0 or p.name.strip() != ""


def format_summary(calculation: CalculationInput, result: AllocationResult,
                   settings=None) -> str:
    """
    Build the summary text from a calculation and its allocation.

    Line order: header, court, shuttle, total, player breakdown,
    total sessions, cost per session, footer.
    """
    settings = settings or default_settings
    costs = calculation.fixed_costs

    def money(amount):
        return format_currency(amount, settings)

    lines = [
        f"🏸 *{settings.SUMMARY_TITLE}* 🏸",
        SEPARATOR,
        f"🏟️ *{settings.COST_A_LABEL}:* {money(costs.cost_a)}",
        f"🏸 *{settings.COST_B_LABEL}:* {money(costs.cost_b)}",
        f"💰 *Total Amount:* {money(result.total_cost)}",
        SEPARATOR,
        "*Player Breakdown:*",
    ]

    listed = [c for c in result.participant_charges if _is_listed(c)]
    for index, charge in enumerate(listed, start=1):
        p = charge.participant
        name = p.name.strip() or f"Player {index}"
        lines.append(f"👤 {name}: {p.attendance_units} sess. -> *{money(charge.charge)}*")

    lines += [
        SEPARATOR,
        f"📊 *Total Sessions:* {result.total_attendance_units}",
        f"💸 *Cost Per Session:* {money(result.rate_per_unit)}",
        SEPARATOR,
        f"_{settings.SUMMARY_FOOTER}_",
    ]
    return "\n".join(lines)
