import pandas as pd
import pytest

from core.batch import PROFILE_COLUMNS, RESULT_COLUMNS, evaluate_frame
from core.max_loan import estimate_max_loan


def test_empty_frame():
    out = evaluate_frame(pd.DataFrame())
    assert out.empty
    assert list(out.columns) == PROFILE_COLUMNS + RESULT_COLUMNS
    assert evaluate_frame(None).empty


def test_rows_evaluated_independently():
    df = pd.DataFrame(
        [
            {"age": 30, "income": 50000, "existing_emi": 0, "credit_score": 750, "requested_loan": 500000, "tenure": 5, "interest": 10},
            {"age": 17, "income": 50000, "existing_emi": 0, "credit_score": 750, "requested_loan": 500000, "tenure": 5, "interest": 10},
            {"age": 40, "income": 20000, "existing_emi": 2200, "credit_score": 700, "requested_loan": 960000, "tenure": 10, "interest": 0},
        ]
    )
    out = evaluate_frame(df)
    assert list(out["eligible"]) == [True, False, False]
    assert list(out["code"]) == ["ELIGIBLE", "AGE_OUT_OF_RANGE", "DTI_TOO_HIGH"]
    assert pd.isna(out["emi"].iloc[1])
    assert out["dti"].iloc[2] == pytest.approx(0.51)
    assert out["max_loan"].iloc[0] == estimate_max_loan(
        {"income": 50000, "existing_emi": 0, "credit_score": 750, "tenure": 5, "interest": 10}
    )
    assert len(df.columns) == 7


def test_camel_case_columns_and_blanks():
    df = pd.DataFrame(
        {
            "age": [30],
            "income": [50000],
            "creditScore": [750],
            "requestedLoan": [None],
            "tenure": [5],
            "interest": [10],
        }
    )
    out = evaluate_frame(df)
    assert out["existing_emi"].iloc[0] == 0
    assert out["requested_loan"].iloc[0] == 0
    assert bool(out["eligible"].iloc[0]) is True
    assert out["emi"].iloc[0] == 0


def test_fractional_cells_not_truncated():
    row = {"income": 50000, "existing_emi": 0, "requested_loan": 500000, "tenure": 5, "interest": 10}
    df = pd.DataFrame(
        [
            {**row, "age": 65.5, "credit_score": 750},
            {**row, "age": 40, "credit_score": 599.9},
        ]
    )
    out = evaluate_frame(df)
    assert list(out["code"]) == ["AGE_OUT_OF_RANGE", "CREDIT_SCORE_TOO_LOW"]
    assert out["age"].iloc[0] == 65.5
    assert out["max_loan"].iloc[1] == 0
