from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel

from src.core.config import SETTINGS
from src.utils.projection_models import ProjectionInput


# -------------------------
# Input form
# -------------------------

class InputField(BaseModel):
    key: str                # form / payload key (camelCase)
    attr: str               # ProjectionInput attribute
    label: str
    default_value: Union[int, float]
    step: Union[int, float] = 1
    integer: bool = False


# Render order of the calculator form.
INPUT_FIELDS: List[InputField] = [
    InputField(key="currentInvestments", attr="current_investments", label="Current Investments (₹)", default_value=5_000_000, step=100_000),
    InputField(key="rateOfReturn", attr="rate_of_return", label="Rate of Return (%)", default_value=8, step=0.5),
    InputField(key="sipMonthly", attr="sip_monthly", label="Monthly SIP (₹)", default_value=100_000, step=5_000),
    InputField(key="currentSavings", attr="current_savings", label="Current Savings (₹)", default_value=1_000_000, step=50_000),
    InputField(key="salaryMonthly", attr="salary_monthly", label="Monthly Salary (₹)", default_value=500_000, step=10_000),
    InputField(key="yearlySalaryIncrement", attr="yearly_salary_increment", label="Yearly Salary & SIP Increment (%)", default_value=5, step=0.5),
    InputField(key="inflation", attr="inflation", label="Inflation Rate (%)", default_value=2, step=0.5),
    InputField(key="years", attr="years", label="Investment Period (Years)", default_value=20, step=1, integer=True),
]


def default_values() -> Dict[str, Any]:
    """Form defaults keyed by field key, with configured overrides applied."""
    values: Dict[str, Any] = {}
    for f in INPUT_FIELDS:
        values[f.key] = SETTINGS.defaults.get(f.attr, f.default_value)
    return values


def default_inputs(overrides: Optional[Mapping[str, Any]] = None) -> ProjectionInput:
    """
    Build a ProjectionInput from the form defaults.

    `overrides` is keyed by field key (camelCase); keys that are not input
    fields are ignored.
    """
    values = default_values()
    for k, v in (overrides or {}).items():
        if k in values:
            values[k] = v
    return ProjectionInput(**values)


# -------------------------
# Errors
# -------------------------

class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    retriable: bool = False
