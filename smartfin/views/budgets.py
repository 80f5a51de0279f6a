# smartfin/views/budgets.py
from datetime import date

import streamlit as st

from smartfin import services
from smartfin.analytics import budget_progress
from smartfin.errors import ApiError
from smartfin.formatting import format_currency, month_title
from smartfin.validation import validate_budget

EXCEEDED_MESSAGE = "You've exceeded your budget!"
MONTHS_BACK = 24


def month_options(today=None, months_back=MONTHS_BACK):
    """YYYY-MM strings from the current month back ``months_back`` months"""
    today = today or date.today()
    year, month = today.year, today.month
    options = []
    for _ in range(months_back + 1):
        options.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return options


def submit_budget(session, month, amount):
    payload, error = validate_budget(month, amount)
    if error:
        return error
    try:
        services.set_budget(session.token, payload["month"], payload["amount"])
    except ApiError as e:
        return str(e)
    return None


def render_progress(budget):
    progress = budget_progress(budget)
    col_spent, col_budget = st.columns(2)
    col_spent.write(f"{format_currency(budget.spent)} spent")
    col_budget.write(f"**Budget: {format_currency(budget.amount)}**")
    st.progress(progress.bar_fraction, text=progress.label())
    if progress.exceeded:
        st.error(EXCEEDED_MESSAGE)


def render(session):
    st.header("💰 Monthly Budgets")

    month = st.selectbox("📅 Select Month", month_options(), format_func=month_title, key="budget_month")

    try:
        with st.spinner("🔄 Loading budget..."):
            budget = services.get_budget(session.token, month)
    except ApiError as e:
        st.error(f"❌ {e}")
        budget = None

    with st.container(border=True):
        if budget:
            st.subheader(f"Budget for {month_title(month)}")
            render_progress(budget)
        else:
            st.info("No budget set for this month.")

    action = "Update" if budget else "Set"
    with st.form(f"budget_form_{month}"):
        st.markdown(f"**{action} Budget Amount**")
        amount = st.text_input("Budget amount", value=str(budget.amount) if budget else "",
                               placeholder="Enter budget amount")
        submitted = st.form_submit_button(f"{action} Budget", use_container_width=True)

    if submitted:
        error = submit_budget(session, month, amount)
        if error:
            st.error(f"❌ {error}")
        else:
            st.rerun()
