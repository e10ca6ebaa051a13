import streamlit as st

# (profile field, label, default, step). Integer defaults give integer inputs.
APPLICANT_FIELDS = [
    ("age", "Age", 0, 1),
    ("income", "Monthly Income", 0.0, 1000.0),
    ("existing_emi", "Existing EMIs (monthly)", 0.0, 500.0),
    ("credit_score", "Credit Score", 0, 1),
    ("requested_loan", "Loan Amount", 0.0, 10000.0),
    ("tenure", "Tenure (years)", 0.0, 1.0),
    ("interest", "Interest Rate %", 0.0, 0.25),
]

FIELD_HELP = {
    "income": "Net monthly income.",
    "existing_emi": "Total of installments already being paid each month.",
    "credit_score": "Bureau score between 300 and 900.",
    "interest": "Annual interest rate, e.g. 12 for 12%.",
}


def _key(field: str) -> str:
    return f"lf_{field}"


def reset_applicant_form():
    """Put every applicant field back to zero."""
    for field, _, default, _ in APPLICANT_FIELDS:
        st.session_state[_key(field)] = default


def render_applicant_form() -> dict:
    """Applicant inputs laid out two per row; returns the current values."""
    for field, _, default, _ in APPLICANT_FIELDS:
        st.session_state.setdefault(_key(field), default)
    for i in range(0, len(APPLICANT_FIELDS), 2):
        cols = st.columns(2)
        for col, (field, label, _, step) in zip(cols, APPLICANT_FIELDS[i : i + 2]):
            with col:
                st.number_input(label, step=step, key=_key(field), help=FIELD_HELP.get(field))
    return {field: st.session_state[_key(field)] for field, _, _, _ in APPLICANT_FIELDS}
