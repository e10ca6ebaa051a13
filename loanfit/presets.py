from pydantic import BaseModel, ConfigDict

DISCLAIMER = (
    "Figures are indicative estimates based on simplified underwriting rules "
    "(age, income, credit score and a debt-to-income cap). They are not an offer "
    "of credit; lender policy, bureau checks and document verification prevail."
)

CURRENCY_SYMBOL = "₹"


class UnderwritingPolicy(BaseModel):
    """Thresholds shared by the eligibility rules and the max-loan search."""

    model_config = ConfigDict(frozen=True)

    min_age: int = 18
    max_age: int = 65
    min_credit_score: int = 300
    max_credit_score: int = 900
    min_income: float = 8000.0
    min_approval_score: int = 600
    max_dti: float = 0.5
    # Upper bound of the max-loan search, as a multiple of monthly income.
    search_income_multiple: float = 200.0
    search_iterations: int = 60


DEFAULT_POLICY = UnderwritingPolicy()
