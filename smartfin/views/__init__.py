# smartfin/views/__init__.py
from smartfin import routes
from smartfin.views import analytics, budgets, dashboard, goals, home, login, profile, register, transactions

PAGES = {
    routes.HOME: home.render,
    routes.LOGIN: login.render,
    routes.REGISTER: register.render,
    routes.DASHBOARD: dashboard.render,
    routes.TRANSACTIONS: transactions.render,
    routes.BUDGETS: budgets.render,
    routes.GOALS: goals.render,
    routes.ANALYTICS: analytics.render,
    routes.PROFILE: profile.render,
}
