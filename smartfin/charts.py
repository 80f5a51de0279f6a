# smartfin/charts.py

import plotly.express as px
import plotly.graph_objects as go

from smartfin import config

INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"
LINE_COLOR = "#4f46e5"
PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#AF19FF", "#FF1943"]


def income_vs_expense_chart(income, expense):
    """Grouped bar of total income against total expense"""
    fig = go.Figure()
    fig.add_trace(go.Bar(x=["Total Flow"], y=[income], name="income", marker_color=INCOME_COLOR))
    fig.add_trace(go.Bar(x=["Total Flow"], y=[expense], name="expense", marker_color=EXPENSE_COLOR))
    fig.update_layout(
        barmode="group",
        height=400,
        template="plotly_white",
        yaxis_title=f"Amount ({config.CURRENCY_SYMBOL})",
    )
    return fig


def monthly_expense_chart(monthly):
    fig = px.line(monthly, x="name", y="expense", markers=True, title="Monthly Expenses")
    fig.update_traces(line=dict(color=LINE_COLOR, width=2))
    fig.update_layout(
        template="plotly_white",
        xaxis_title="Month",
        yaxis_title=f"Amount ({config.CURRENCY_SYMBOL})",
        height=300,
    )
    return fig


def category_pie_chart(categories):
    fig = px.pie(
        categories,
        names="name",
        values="value",
        title="Expenses by Category",
        color_discrete_sequence=PIE_COLORS,
    )
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(height=300)
    return fig
