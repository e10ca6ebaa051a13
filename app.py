import pandas as pd
import streamlit as st

from core.batch import evaluate_frame
from core.max_loan import estimate_max_loan
from core.rules import evaluate_eligibility
from core.version import __version__
from export.pdf_export import build_summary_pdf
from loanfit.calculators import amortization_schedule
from loanfit.models import ApplicantProfile
from loanfit.presets import DEFAULT_POLICY, DISCLAIMER
from ui.forms import render_applicant_form, reset_applicant_form
from ui.results import render_eligibility_result, render_max_loan_result


def render_batch_sidebar():
    """CSV upload that runs every row through eligibility and max loan."""
    st.sidebar.header("Batch Evaluation")
    upload = st.sidebar.file_uploader("Applicants CSV", type="csv")
    if upload is None:
        st.sidebar.caption(
            "Columns: age, income, existing_emi, credit_score, requested_loan, tenure, interest"
        )
        return
    results = evaluate_frame(pd.read_csv(upload))
    st.sidebar.caption(f"{int(results['eligible'].sum())} of {len(results)} applicants eligible")
    st.sidebar.download_button(
        "Download Results",
        results.to_csv(index=False).encode(),
        file_name="loanfit_results.csv",
        mime="text/csv",
    )


def render_eligibility(profile: ApplicantProfile):
    result = evaluate_eligibility(profile)
    render_eligibility_result(result)
    schedule = None
    if result.eligible:
        terms = profile.loan_terms()
        schedule = amortization_schedule(terms.principal, terms.annual_rate_percent, terms.years)
        if not schedule.empty:
            with st.expander("Amortization Schedule"):
                st.dataframe(schedule.round(2), hide_index=True)
    st.download_button(
        "Download Summary PDF",
        build_summary_pdf(profile, result=result, schedule=schedule),
        file_name="eligibility_summary.pdf",
        mime="application/pdf",
        key="pdf_eligibility",
    )


def render_max_loan(profile: ApplicantProfile):
    max_loan = estimate_max_loan(profile)
    render_max_loan_result(max_loan, profile)
    st.download_button(
        "Download Summary PDF",
        build_summary_pdf(profile, max_loan=max_loan),
        file_name="max_loan_summary.pdf",
        mime="application/pdf",
        key="pdf_max_loan",
    )


def main():
    st.title("Loan Eligibility & EMI Calculator")
    st.caption(
        f"v{__version__} • EMI • Eligibility rules • Max loan under a {DEFAULT_POLICY.max_dti:.0%} DTI cap"
    )

    values = render_applicant_form()
    c1, c2, c3 = st.columns(3)
    check = c1.button("Check Eligibility", key="check_eligibility")
    estimate = c2.button("Estimate Max Loan", key="estimate_max")
    c3.button("Reset", key="reset_form", on_click=reset_applicant_form)

    profile = ApplicantProfile(**values)
    if check:
        render_eligibility(profile)
    elif estimate:
        render_max_loan(profile)

    st.caption(DISCLAIMER)
    render_batch_sidebar()


if __name__ == "__main__":
    main()
