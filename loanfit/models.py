from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from loanfit.calculators import compute_installment, nz

# Fields accept both ``existing_emi`` and ``existingEmi`` style names.
_VALUE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class LoanTerms(BaseModel):
    model_config = _VALUE_CONFIG

    principal: float
    annual_rate_percent: float = 0.0
    years: float

    def installment(self) -> float:
        return compute_installment(self.principal, self.annual_rate_percent, self.years)


class AffordabilityProfile(BaseModel):
    """What the max-loan search needs: monthly income and obligations, score
    and the intended ``tenure`` (years) and ``interest`` (annual %)."""

    model_config = _VALUE_CONFIG

    income: float
    existing_emi: float = 0.0
    credit_score: float
    tenure: Optional[float] = None
    interest: Optional[float] = None

    @field_validator("existing_emi", mode="before")
    @classmethod
    def _blank_emi_is_zero(cls, v):
        # null means no existing obligations
        return 0.0 if v is None else v


class ApplicantProfile(AffordabilityProfile):
    """Applicant data for an eligibility decision on a specific request.

    ``income`` and ``existing_emi`` are monthly amounts.  A missing
    ``requested_loan``, ``tenure`` or ``interest`` reads as zero, which gives
    a zero installment.  ``age`` and ``credit_score`` are whole numbers in
    practice; fractional values are kept as given and left to the rules.
    """

    age: float
    requested_loan: Optional[float] = None

    def loan_terms(self) -> LoanTerms:
        return LoanTerms(
            principal=nz(self.requested_loan),
            annual_rate_percent=nz(self.interest),
            years=nz(self.tenure),
        )


class EligibilityResult(BaseModel):
    model_config = _VALUE_CONFIG

    eligible: bool
    code: str
    reason: str
    emi: Optional[float] = None
    dti: Optional[float] = None
