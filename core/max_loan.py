"""Largest principal that keeps debt-to-income within policy."""
from __future__ import annotations
import logging
import math

from core.rules import ProfileLike, as_profile
from loanfit.calculators import compute_installment, debt_to_income
from loanfit.models import AffordabilityProfile
from loanfit.presets import DEFAULT_POLICY, UnderwritingPolicy

logger = logging.getLogger(__name__)


def estimate_max_loan(
    profile: ProfileLike, policy: UnderwritingPolicy = DEFAULT_POLICY
) -> int:
    """Binary search for the maximum loan principal.

    The profile's ``income``, ``existing_emi``, ``tenure`` and ``interest``
    drive the search; ``requested_loan`` is ignored.  Profiles below the
    minimum credit score or income get ``0`` (no loan recommended).  The
    search interval is ``[0, income * search_income_multiple]`` and always
    runs the full ``search_iterations`` halvings.
    """
    p = as_profile(profile, AffordabilityProfile)
    if p.credit_score < policy.min_approval_score or p.income < policy.min_income:
        return 0

    low, high = 0.0, p.income * policy.search_income_multiple
    for _ in range(policy.search_iterations):
        mid = (low + high) / 2
        emi = compute_installment(mid, p.interest, p.tenure)
        if debt_to_income(p.existing_emi, emi, p.income) > policy.max_dti:
            high = mid
        else:
            low = mid

    # Round half up, as whole currency units.
    result = int(math.floor(low + 0.5))
    logger.debug("max loan %d (income=%s, tenure=%s, rate=%s)", result, p.income, p.tenure, p.interest)
    return result
