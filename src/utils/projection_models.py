from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ProjectionInput(BaseModel):
    """One run's worth of calculator inputs. Percentages are whole numbers (8 means 8%)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current_investments: float = Field(0.0, alias="currentInvestments", description="Existing invested principal.")
    current_savings: float = Field(0.0, alias="currentSavings", description="Existing uninvested principal.")
    rate_of_return: float = Field(0.0, alias="rateOfReturn", description="Annual return (%).")
    sip_monthly: float = Field(0.0, alias="sipMonthly", description="Initial monthly SIP.")
    salary_monthly: float = Field(0.0, alias="salaryMonthly", description="Initial monthly salary (display only).")
    yearly_salary_increment: float = Field(0.0, alias="yearlySalaryIncrement", description="Annual % step-up of salary and SIP.")
    inflation: float = Field(0.0, alias="inflation", description="Annual inflation (%).")
    years: int = Field(0, alias="years", description="Number of yearly periods to simulate.")


class YearlySnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    total_wealth: float = Field(..., alias="totalWealth")
    real_wealth: float = Field(..., alias="realWealth")
    # rates already escalated, i.e. the ones that apply from next year
    monthly_sip: float = Field(..., alias="monthlySIP")
    monthly_salary: float = Field(..., alias="monthlySalary")


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    starting_wealth: float = Field(..., alias="startingWealth")
    series: List[YearlySnapshot] = Field(default_factory=list)


class ProjectionSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    years: int
    starting_wealth: float = Field(..., alias="startingWealth")
    final_total_wealth: float = Field(..., alias="finalTotalWealth")
    final_real_wealth: float = Field(..., alias="finalRealWealth")
    total_growth: float = Field(..., alias="totalGrowth", description="final_total_wealth / starting_wealth - 1")
    real_growth: float = Field(..., alias="realGrowth", description="final_real_wealth / starting_wealth - 1")
    final_monthly_sip: float = Field(..., alias="finalMonthlySIP")
    final_monthly_salary: float = Field(..., alias="finalMonthlySalary")
