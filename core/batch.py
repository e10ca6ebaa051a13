"""Evaluate a table of applicants in one pass."""
from __future__ import annotations
import logging

import pandas as pd
from pydantic.alias_generators import to_camel

from core.max_loan import estimate_max_loan
from core.rules import evaluate_eligibility
from loanfit.calculators import nz_series
from loanfit.models import ApplicantProfile
from loanfit.presets import DEFAULT_POLICY, UnderwritingPolicy

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = list(ApplicantProfile.model_fields)
RESULT_COLUMNS = ["eligible", "code", "reason", "emi", "dti", "max_loan"]


def evaluate_frame(
    df: pd.DataFrame, policy: UnderwritingPolicy = DEFAULT_POLICY
) -> pd.DataFrame:
    """Run eligibility and the max-loan search for every row of ``df``.

    Columns may use ``existing_emi`` or ``existingEmi`` style names.  Blank
    or missing numeric cells count as ``0``; fractional ages and scores are
    evaluated as given, not truncated.  The returned frame is a copy
    of the input with the result columns appended.
    """

    if df is None or df.empty:
        return pd.DataFrame(columns=PROFILE_COLUMNS + RESULT_COLUMNS)
    out = df.rename(columns={to_camel(c): c for c in PROFILE_COLUMNS}).copy()
    for c in PROFILE_COLUMNS:
        out[c] = nz_series(out.get(c))

    results = []
    for row in out[PROFILE_COLUMNS].to_dict(orient="records"):
        profile = ApplicantProfile(**row)
        res = evaluate_eligibility(profile, policy)
        results.append(
            {
                "eligible": res.eligible,
                "code": res.code,
                "reason": res.reason,
                "emi": res.emi,
                "dti": res.dti,
                "max_loan": estimate_max_loan(profile, policy),
            }
        )
    res_df = pd.DataFrame(results, columns=RESULT_COLUMNS, index=out.index)
    logger.info(
        "evaluated %d applicants, %d eligible", len(res_df), int(res_df["eligible"].sum())
    )
    return pd.concat([out, res_df], axis=1)
