from __future__ import annotations
import math
import pandas as pd

SCHEDULE_COLUMNS = ["Month", "Payment", "Interest", "Principal", "Balance"]


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form fields and uploaded applicant sheets leave blanks that arrive as
    ``None`` or ``NaN``.  This helper mirrors the spreadsheet ``NZ()``
    function so that a missing rate or term reads as zero instead of
    breaking the math.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def nz_series(s):
    """Coerce a sequence/Series to numeric with missing values as ``0``."""

    if s is None:
        return 0.0
    return pd.to_numeric(s, errors="coerce").fillna(0.0)


def compute_installment(principal, annual_rate_percent, years):
    """Calculate the equated monthly installment (EMI) for a loan.

    ``principal`` is the amount borrowed, ``annual_rate_percent`` is the
    nominal yearly rate (``12`` for 12%) and ``years`` is the term.  A
    non-finite or non-positive principal, or a non-positive term, is a
    defined degenerate case and yields ``0.0`` rather than an error.
    """

    L = nz(principal)
    n = nz(years) * 12
    r = nz(annual_rate_percent) / 1200
    if not math.isfinite(L) or L <= 0 or n <= 0:
        return 0.0
    if r == 0:
        return L / n
    growth = (1 + r) ** n
    return L * r * growth / (growth - 1)


def debt_to_income(existing_emi, emi, income):
    """Total monthly obligations (existing + proposed) as a share of income."""

    inc = nz(income)
    if inc == 0:
        return math.inf
    return (nz(existing_emi) + nz(emi)) / inc


def amortization_schedule(principal, annual_rate_percent, years) -> pd.DataFrame:
    """Month-by-month split of each installment into interest and principal.

    The payment is the EMI from :func:`compute_installment` for the same
    ``years``, so it matches the installment quoted by the eligibility check.
    A fractional number of months adds one shorter final payment that clears
    the remaining balance.
    """

    payment = compute_installment(principal, annual_rate_percent, years)
    if payment <= 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    # round off float noise such as 7.000000000000001 months
    months = math.ceil(round(nz(years) * 12, 9))
    r = nz(annual_rate_percent) / 1200
    balance = nz(principal)
    rows = []
    for month in range(1, months + 1):
        interest = balance * r
        principal_part = min(payment - interest, balance)
        balance = max(balance - principal_part, 0.0)
        rows.append(
            {
                "Month": month,
                "Payment": interest + principal_part,
                "Interest": interest,
                "Principal": principal_part,
                "Balance": balance,
            }
        )
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
