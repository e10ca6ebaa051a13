from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Tuple, Union

from core.utils import format_pct
from loanfit.calculators import compute_installment, debt_to_income
from loanfit.models import AffordabilityProfile, ApplicantProfile, EligibilityResult
from loanfit.presets import DEFAULT_POLICY, UnderwritingPolicy

logger = logging.getLogger(__name__)

ProfileLike = Union[AffordabilityProfile, Mapping]

SUCCESS_REASON = "Looks good - basic checks passed."


@dataclass(frozen=True)
class EligibilityRule:
    """A hard gate: ``fails`` returns True when the profile is rejected.

    ``reason`` is a template formatted with the active ``policy``.
    """

    code: str
    fails: Callable[[ApplicantProfile, UnderwritingPolicy], bool]
    reason: str


# Order matters: the first failing rule is the one reported.
ELIGIBILITY_RULES: Tuple[EligibilityRule, ...] = (
    EligibilityRule(
        "AGE_OUT_OF_RANGE",
        lambda p, pol: p.age < pol.min_age or p.age > pol.max_age,
        "Age outside acceptable range ({policy.min_age}-{policy.max_age}).",
    ),
    EligibilityRule(
        "INCOME_NOT_POSITIVE",
        lambda p, pol: p.income <= 0,
        "Income must be positive.",
    ),
    EligibilityRule(
        "CREDIT_SCORE_INVALID",
        lambda p, pol: p.credit_score < pol.min_credit_score
        or p.credit_score > pol.max_credit_score,
        "Credit score out of range.",
    ),
    EligibilityRule(
        "INCOME_TOO_LOW",
        lambda p, pol: p.income < pol.min_income,
        "Income too low for standard loans.",
    ),
    EligibilityRule(
        "CREDIT_SCORE_TOO_LOW",
        lambda p, pol: p.credit_score < pol.min_approval_score,
        "Credit score below acceptable threshold ({policy.min_approval_score}).",
    ),
)


def as_profile(profile: ProfileLike, model=ApplicantProfile):
    """Accept either a model or a plain mapping of applicant fields."""
    if isinstance(profile, model):
        return profile
    return model.model_validate(dict(profile))


def evaluate_eligibility(
    profile: ProfileLike, policy: UnderwritingPolicy = DEFAULT_POLICY
) -> EligibilityResult:
    """Run the gate rules in order, then the debt-to-income check.

    Stops at the first failing rule.  ``emi`` and ``dti`` are attached only
    once the profile got past the gates and the installment was computed.
    """
    p = as_profile(profile)

    for rule in ELIGIBILITY_RULES:
        if rule.fails(p, policy):
            logger.debug("eligibility rejected by %s", rule.code)
            return EligibilityResult(
                eligible=False,
                code=rule.code,
                reason=rule.reason.format(policy=policy),
            )

    emi = compute_installment(p.requested_loan, p.interest, p.tenure)
    dti = debt_to_income(p.existing_emi, emi, p.income)
    if dti > policy.max_dti:
        logger.debug("eligibility rejected by DTI_TOO_HIGH (dti=%.4f)", dti)
        return EligibilityResult(
            eligible=False,
            code="DTI_TOO_HIGH",
            reason=f"DTI too high. ({format_pct(dti)})",
            emi=emi,
            dti=dti,
        )

    logger.debug("eligibility passed (emi=%.2f, dti=%.4f)", emi, dti)
    return EligibilityResult(
        eligible=True, code="ELIGIBLE", reason=SUCCESS_REASON, emi=emi, dti=dti
    )
