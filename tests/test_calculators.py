import math

import pytest

from loanfit.calculators import (
    SCHEDULE_COLUMNS,
    amortization_schedule,
    compute_installment,
    debt_to_income,
    nz,
)


def test_known_amortization_value():
    assert compute_installment(100000, 12, 1) == pytest.approx(8884.88, abs=0.01)


def test_matches_closed_form():
    r = 9.5 / 1200
    n = 20 * 12
    expected = 2500000 * r * (1 + r) ** n / ((1 + r) ** n - 1)
    assert compute_installment(2500000, 9.5, 20) == pytest.approx(expected)


@pytest.mark.parametrize("principal,years", [(120000, 10), (5000, 0.5), (1, 30)])
def test_zero_interest_is_straight_division(principal, years):
    assert compute_installment(principal, 0, years) == pytest.approx(principal / (years * 12))


@pytest.mark.parametrize(
    "principal,rate,years",
    [(0, 10, 5), (1000, 10, 0), (-5, 10, 5), (1000, 10, -1), (math.inf, 10, 5), (math.nan, 10, 5), (None, 10, 5)],
)
def test_degenerate_inputs_yield_zero(principal, rate, years):
    assert compute_installment(principal, rate, years) == 0.0


def test_missing_rate_reads_as_zero_interest():
    assert compute_installment(12000, None, 1) == pytest.approx(1000.0)


def test_higher_rate_means_higher_installment():
    assert compute_installment(500000, 14, 5) > compute_installment(500000, 8, 5)


def test_debt_to_income():
    assert debt_to_income(2000, 8000, 20000) == pytest.approx(0.5)
    assert debt_to_income(None, 500, 1000) == pytest.approx(0.5)
    assert debt_to_income(0, 100, 0) == math.inf


def test_nz_fallbacks():
    assert nz(None) == 0.0
    assert nz(float("nan"), 5.0) == 5.0
    assert nz("abc") == 0.0
    assert nz("12.5") == 12.5


def test_schedule_pays_off_loan():
    sched = amortization_schedule(100000, 12, 1)
    assert list(sched.columns) == SCHEDULE_COLUMNS
    assert len(sched) == 12
    assert sched["Payment"].iloc[0] == pytest.approx(compute_installment(100000, 12, 1))
    assert sched["Interest"].iloc[0] == pytest.approx(1000.0)
    assert sched["Principal"].sum() == pytest.approx(100000, abs=0.01)
    assert sched["Balance"].iloc[-1] == pytest.approx(0.0, abs=0.01)
    assert (sched["Balance"].diff().dropna() < 0).all()


def test_schedule_zero_interest():
    sched = amortization_schedule(1200, 0, 1)
    assert (sched["Interest"] == 0).all()
    assert sched["Payment"].iloc[0] == pytest.approx(100.0)


def test_schedule_degenerate_is_empty():
    sched = amortization_schedule(0, 10, 5)
    assert sched.empty
    assert list(sched.columns) == SCHEDULE_COLUMNS
    assert amortization_schedule(1000, 10, 0).empty


def test_schedule_payment_matches_fractional_tenure_emi():
    years = 6.5 / 12
    emi = compute_installment(60000, 12, years)
    sched = amortization_schedule(60000, 12, years)
    assert len(sched) == 7
    assert sched["Payment"].iloc[0] == pytest.approx(emi)
    assert sched["Payment"].iloc[-1] < emi
    assert sched["Balance"].iloc[-1] == pytest.approx(0.0, abs=0.01)
    assert sched["Principal"].sum() == pytest.approx(60000, abs=0.01)
