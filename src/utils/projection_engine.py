from __future__ import annotations

import math
from typing import List, Optional

from src.utils.logging import get_logger
from src.utils.projection_models import (
    ProjectionInput, ProjectionResult, ProjectionSummary, YearlySnapshot
)

log = get_logger(__name__)

MONTHS_PER_YEAR = 12


def _growth(pct: float) -> float:
    return 1.0 + pct / 100.0


def _pow(base: float, exp: float) -> float:
    # IEEE results instead of complex numbers / exceptions
    if base < 0 and not float(exp).is_integer():
        return math.nan
    try:
        return math.pow(base, exp)
    except OverflowError:
        return math.inf if base > 0 or exp % 2 == 0 else -math.inf


def _div(num: float, den: float) -> float:
    try:
        return num / den
    except ZeroDivisionError:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _round(x: float) -> float:
    """Round half up to a whole currency unit. inf/nan pass through."""
    if not math.isfinite(x):
        return x
    # x - floor(x) is exact; x + 0.5 is not
    r = math.floor(x)
    return float(r + 1 if x - r >= 0.5 else r)


def project(inp: ProjectionInput) -> ProjectionResult:
    """
    Year-by-year wealth projection.

    Each year the running wealth gets one annual compounding step, then twelve
    monthly SIP contributions each followed by a monthly factor derived from the
    same annual rate. Salary and SIP step up after the year closes. Only the
    values written to snapshots are rounded.
    """
    wealth = inp.current_investments + inp.current_savings
    starting_wealth = wealth

    salary = inp.salary_monthly
    sip = inp.sip_monthly

    annual_factor = _growth(inp.rate_of_return)
    monthly_factor = _pow(annual_factor, 1.0 / MONTHS_PER_YEAR)
    stepup = _growth(inp.yearly_salary_increment)
    deflator = _growth(inp.inflation)

    series: List[YearlySnapshot] = []
    for year in range(1, inp.years + 1):
        wealth *= annual_factor

        for _ in range(MONTHS_PER_YEAR):
            wealth += sip
            wealth *= monthly_factor

        salary *= stepup
        sip *= stepup

        real_wealth = _div(wealth, _pow(deflator, year))

        series.append(
            YearlySnapshot(
                year=year,
                total_wealth=_round(wealth),
                real_wealth=_round(real_wealth),
                monthly_sip=_round(sip),
                monthly_salary=_round(salary),
            )
        )

    log.debug(
        "projection years=%s starting_wealth=%s final_wealth=%s",
        inp.years, starting_wealth, series[-1].total_wealth if series else starting_wealth,
    )
    return ProjectionResult(starting_wealth=starting_wealth, series=series)


def summarize(result: ProjectionResult) -> Optional[ProjectionSummary]:
    """Final-year figures and growth relative to starting wealth; None for an empty series."""
    if not result.series:
        return None

    last = result.series[-1]
    start = result.starting_wealth
    return ProjectionSummary(
        years=last.year,
        starting_wealth=start,
        final_total_wealth=last.total_wealth,
        final_real_wealth=last.real_wealth,
        total_growth=_div(last.total_wealth, start) - 1,
        real_growth=_div(last.real_wealth, start) - 1,
        final_monthly_sip=last.monthly_sip,
        final_monthly_salary=last.monthly_salary,
    )
