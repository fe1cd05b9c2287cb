from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.core.schemas import INPUT_FIELDS, ErrorEnvelope, default_inputs
from src.utils.logging import get_logger
from src.utils.projection_engine import project, summarize

log = get_logger(__name__)

# common aliases -> canonical field keys
_ALIASES: Dict[str, str] = {
    "initial_investment": "currentInvestments",
    "current_investment": "currentInvestments",
    "cash": "currentSavings",
    "monthly_contribution": "sipMonthly",
    "monthly_investment": "sipMonthly",
    "sip": "sipMonthly",
    "expected_return": "rateOfReturn",
    "expected_return_pct": "rateOfReturn",
    "salary": "salaryMonthly",
    "stepup_pct": "yearlySalaryIncrement",
    "stepup_annual_pct": "yearlySalaryIncrement",
    "inflation_pct": "inflation",
    "time_horizon_years": "years",
}

for _f in INPUT_FIELDS:
    _ALIASES[_f.key] = _f.key
    _ALIASES[_f.attr] = _f.key


class ProjectionError(ValueError):
    def __init__(self, envelope: ErrorEnvelope) -> None:
        super().__init__(envelope.message)
        self.envelope = envelope


def normalize_payload(payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Map payload keys onto field keys. Unknown keys are dropped; None means 'use the default'."""
    out: Dict[str, Any] = {}
    for k, v in (payload or {}).items():
        key = _ALIASES.get(str(k).strip())
        if key is None:
            log.debug("ignoring unknown payload key %r", k)
            continue
        if v is None or (isinstance(v, str) and v.strip() == ""):
            continue
        out[key] = v
    return out


def tool_project_wealth(payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    p = normalize_payload(payload)

    try:
        inp = default_inputs(p)
    except ValidationError as e:
        fields = [".".join(str(x) for x in err.get("loc", ())) for err in e.errors()]
        log.warning("rejected projection payload fields=%s", fields)
        raise ProjectionError(
            ErrorEnvelope(
                code="INVALID_INPUT",
                message=f"Invalid numeric input for: {', '.join(fields) or 'payload'}",
                details={"fields": fields},
            )
        ) from e

    result = project(inp)
    summary = summarize(result)
    log.info("projection computed years=%s points=%s", inp.years, len(result.series))

    return {
        "inputs": inp.model_dump(by_alias=True),
        "projection": result.model_dump(by_alias=True),
        "summary": summary.model_dump(by_alias=True) if summary else None,
    }
