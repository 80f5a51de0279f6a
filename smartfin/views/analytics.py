# smartfin/views/analytics.py
from functools import partial

import streamlit as st

from smartfin import services
from smartfin.analytics import category_expenses, monthly_expenses
from smartfin.charts import category_pie_chart, monthly_expense_chart
from smartfin.errors import ApiError
from smartfin.formatting import format_currency


def render(session):
    st.header("📈 Analytics")

    try:
        with st.spinner("🔄 Crunching your numbers..."):
            transactions, prediction = services.fetch_parallel(
                partial(services.list_transactions, session.token),
                partial(services.get_prediction, session.token))
    except ApiError as e:
        st.error(f"❌ {e}")
        return

    with st.container(border=True):
        st.metric("🔮 Predicted Expense for Next Month", format_currency(prediction.next_month_prediction))
        st.caption("Based on your past spending patterns.")

    monthly = monthly_expenses(transactions)
    categories = category_expenses(transactions)

    col1, col2 = st.columns(2)
    with col1:
        with st.container(border=True):
            st.subheader("Monthly Expenses")
            if monthly.empty:
                st.info("No expense data yet.")
            else:
                st.plotly_chart(monthly_expense_chart(monthly), use_container_width=True)
    with col2:
        with st.container(border=True):
            st.subheader("Expenses by Category")
            if categories.empty:
                st.info("No expense data yet.")
            else:
                st.plotly_chart(category_pie_chart(categories), use_container_width=True)
