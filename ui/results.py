import streamlit as st
from core.utils import format_currency, format_pct
from loanfit.calculators import compute_installment
from loanfit.models import AffordabilityProfile, EligibilityResult


def render_eligibility_result(result: EligibilityResult):
    """Verdict with EMI and DTI, or the reason the profile was turned down."""
    if result.eligible:
        st.success("Eligible")
        st.markdown(f"**EMI:** {format_currency(result.emi)}")
        st.markdown(f"**DTI:** {format_pct(result.dti)}")
        st.caption(result.reason)
    else:
        st.error("Not Eligible")
        st.markdown(result.reason)
        if result.emi:
            st.markdown(f"**EMI:** {format_currency(result.emi)}")


def render_max_loan_result(max_loan: int, profile: AffordabilityProfile):
    if max_loan <= 0:
        st.error("No loan recommended")
        st.caption("Profile doesn't meet criteria.")
        return
    emi = compute_installment(max_loan, profile.interest, profile.tenure)
    st.success(f"Max Loan: {format_currency(max_loan)}")
    st.caption(f"Approx EMI: {format_currency(emi)} / month")
