# smartfin/views/dashboard.py
from functools import partial

import streamlit as st

from smartfin import services
from smartfin.analytics import income_expense_totals
from smartfin.charts import income_vs_expense_chart
from smartfin.errors import ApiError
from smartfin.formatting import format_currency, format_date, format_signed_amount

RECENT_COUNT = 5


def load_dashboard(token):
    """Returns (transactions, prediction) fetched in parallel"""
    return services.fetch_parallel(
        partial(services.list_transactions, token),
        partial(services.get_prediction, token),
    )


def render(session):
    st.header("📊 Dashboard")
    if session.user:
        st.markdown(f"Welcome back, **{session.user.username}**!")

    try:
        with st.spinner("🔄 Loading dashboard..."):
            transactions, prediction = load_dashboard(session.token)
    except ApiError as e:
        st.error(f"❌ {e}")
        return

    income, expense = income_expense_totals(transactions)

    col1, col2, col3 = st.columns(3)
    col1.metric("💵 Total Income", format_currency(income))
    col2.metric("💸 Total Expense", format_currency(expense))
    col3.metric("📈 Next Month's Predicted Expense", format_currency(prediction.next_month_prediction))

    with st.container(border=True):
        st.subheader("Income vs Expense")
        st.plotly_chart(income_vs_expense_chart(income, expense), use_container_width=True)

    with st.container(border=True):
        st.subheader("🕒 Recent Transactions")
        recent = transactions[:RECENT_COUNT]
        if not recent:
            st.info("💳 No transactions yet.")
            return
        rows = [{
            "Title": t.title,
            "Amount": format_signed_amount(t),
            "Category": t.category,
            "Date": format_date(t.date),
        } for t in recent]
        st.dataframe(rows, use_container_width=True, hide_index=True)
