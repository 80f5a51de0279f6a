# smartfin/views/home.py
import streamlit as st

from smartfin import routes
from smartfin.navigation import navigate

FEATURES = [
    ("📈", "Expense Tracking",
     "Monitor your spending habits with detailed transaction logs and categorization."),
    ("🎯", "Financial Goals",
     "Set and track your financial goals, from saving for a vacation to a down payment."),
    ("🥧", "Powerful Analytics",
     "Visualize your financial data with insightful charts and predictive forecasts."),
    ("💵", "Smart Budgeting",
     "Create monthly budgets to stay on top of your finances and control your spending."),
]


def render(session):
    st.title("Take control of your finances with SmartFin")
    st.markdown(
        "**Track spending, set budgets, reach your goals.** "
        "SmartFin keeps every rupee accounted for."
    )

    col1, col2, _ = st.columns([1, 1, 3])
    if session.is_authenticated:
        if col1.button("Go to Dashboard", type="primary", use_container_width=True, key="home_dashboard"):
            navigate(routes.DASHBOARD)
    else:
        if col1.button("Get Started", type="primary", use_container_width=True, key="home_register"):
            navigate(routes.REGISTER)
        if col2.button("Log In", use_container_width=True, key="home_login"):
            navigate(routes.LOGIN)

    st.markdown("---")
    st.subheader("Why SmartFin?")
    columns = st.columns(len(FEATURES))
    for col, (icon, title, description) in zip(columns, FEATURES):
        with col.container(border=True):
            st.markdown(f"### {icon}")
            st.markdown(f"**{title}**")
            st.caption(description)
