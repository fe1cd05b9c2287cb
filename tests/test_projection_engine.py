import math

import pytest

from src.utils.projection_engine import project, summarize
from src.utils.projection_models import ProjectionInput


def _zero_growth(**kw):
    base = dict(
        currentInvestments=0, currentSavings=0, rateOfReturn=0, sipMonthly=1000,
        salaryMonthly=0, yearlySalaryIncrement=0, inflation=0, years=1,
    )
    base.update(kw)
    return ProjectionInput(**base)


def test_zero_years_gives_empty_series():
    out = project(_zero_growth(currentInvestments=300, currentSavings=200, years=0))
    assert out.series == []
    assert out.starting_wealth == 500


def test_negative_years_gives_empty_series():
    out = project(_zero_growth(years=-3))
    assert out.series == []
    assert summarize(out) is None


def test_series_length_and_years_are_contiguous():
    out = project(_zero_growth(rateOfReturn=8, years=15))
    assert len(out.series) == 15
    assert [s.year for s in out.series] == list(range(1, 16))


def test_one_year_twelve_contributions():
    out = project(_zero_growth())
    assert out.starting_wealth == 0
    y1 = out.series[0]
    assert y1.total_wealth == 12000
    assert y1.real_wealth == 12000
    assert y1.monthly_sip == 1000


def test_two_years_zero_growth():
    out = project(_zero_growth(years=2))
    assert out.series[1].total_wealth == 24000


def test_flat_wealth_without_contributions_or_return():
    out = project(_zero_growth(currentInvestments=250000, currentSavings=50000, sipMonthly=0, years=10))
    assert all(s.total_wealth == 300000 for s in out.series)


def test_deflation_uses_cumulative_inflation():
    out = project(_zero_growth(sipMonthly=0, currentSavings=100000, inflation=10))
    assert out.series[0].total_wealth == 100000
    assert out.series[0].real_wealth == 90909


def test_real_wealth_deflates_by_year_index():
    out = project(_zero_growth(sipMonthly=0, currentSavings=100000, inflation=10, years=2))
    assert out.series[1].real_wealth == round(100000 / 1.1 ** 2)


def test_annual_and_monthly_compounding_both_apply():
    # 100 * 1.12 (annual step) * 1.12 (twelve monthly steps) = 125.44
    out = project(_zero_growth(currentSavings=100, sipMonthly=0, rateOfReturn=12))
    assert out.series[0].total_wealth == 125


def test_total_wealth_non_decreasing_for_positive_return():
    out = project(_zero_growth(currentInvestments=5000, rateOfReturn=8, sipMonthly=500, yearlySalaryIncrement=3, years=30))
    totals = [s.total_wealth for s in out.series]
    assert totals == sorted(totals)


def test_sip_and_salary_recorded_after_step_up():
    out = project(_zero_growth(sipMonthly=1000, salaryMonthly=50000, yearlySalaryIncrement=10, years=2))
    assert out.series[0].monthly_sip == 1100
    assert out.series[0].monthly_salary == 55000
    assert out.series[1].monthly_sip == 1210
    # year 2 contributes at the stepped-up rate
    assert out.series[1].total_wealth == 12000 + 13200


def test_accumulators_are_not_rounded_between_years():
    out = project(_zero_growth(sipMonthly=0.3, years=2))
    assert out.series[0].total_wealth == 4    # 3.6
    assert out.series[1].total_wealth == 7    # 7.2, not 4 + 3.6


def test_half_rounds_up():
    out = project(_zero_growth(currentSavings=0.5, sipMonthly=0))
    assert out.series[0].total_wealth == 1


def test_just_below_half_rounds_down():
    out = project(_zero_growth(currentSavings=0.49999999999999994, sipMonthly=0))
    assert out.series[0].total_wealth == 0


def test_negative_half_rounds_towards_positive():
    out = project(_zero_growth(currentSavings=-2.5, sipMonthly=0))
    assert out.series[0].total_wealth == -2


def test_large_whole_wealth_is_kept_exact():
    start = 2 ** 52 + 1
    out = project(_zero_growth(currentSavings=start, sipMonthly=0))
    assert out.series[0].total_wealth == start
    assert out.series[0].real_wealth == start


def test_identical_inputs_identical_outputs():
    inp = _zero_growth(currentInvestments=5_000_000, rateOfReturn=8, sipMonthly=100_000, inflation=2, years=20)
    assert project(inp).model_dump() == project(inp).model_dump()


def test_inflation_of_minus_100_is_not_rejected():
    out = project(_zero_growth(currentSavings=100, sipMonthly=0, inflation=-100))
    assert out.series[0].total_wealth == 100
    assert out.series[0].real_wealth == math.inf


def test_snake_case_names_accepted():
    inp = ProjectionInput(current_savings=100, sip_monthly=0, years=1)
    assert project(inp).series[0].total_wealth == 100


def test_summary_growth():
    out = project(_zero_growth(currentSavings=100000, sipMonthly=0, inflation=10))
    s = summarize(out)
    assert s.years == 1
    assert s.final_total_wealth == 100000
    assert s.total_growth == pytest.approx(0.0)
    assert s.real_growth == pytest.approx(90909 / 100000 - 1)


def test_summary_growth_from_zero_start_is_infinite():
    s = summarize(project(_zero_growth()))
    assert s.starting_wealth == 0
    assert s.total_growth == math.inf


def test_serialises_with_camel_case_keys():
    dumped = project(_zero_growth()).model_dump(by_alias=True)
    assert dumped["startingWealth"] == 0
    assert set(dumped["series"][0]) == {"year", "totalWealth", "realWealth", "monthlySIP", "monthlySalary"}
