# smartfin/routes.py
"""Path table and the authentication guard.

Rendering lives in ``smartfin.views``; this module only decides which path
a request ends up on.
"""

HOME = "/"
LOGIN = "/login"
REGISTER = "/register"
DASHBOARD = "/dashboard"
TRANSACTIONS = "/transactions"
BUDGETS = "/budgets"
GOALS = "/goals"
ANALYTICS = "/analytics"
PROFILE = "/profile"


class Route:
    def __init__(self, path, title, icon, protected):
        self.path = path
        self.title = title
        self.icon = icon
        self.protected = protected

    def __repr__(self):
        return f"Route({self.path!r}, protected={self.protected})"


ROUTES = {
    HOME: Route(HOME, "Home", "🏠", protected=False),
    LOGIN: Route(LOGIN, "Login", "🔐", protected=False),
    REGISTER: Route(REGISTER, "Register", "📝", protected=False),
    DASHBOARD: Route(DASHBOARD, "Dashboard", "📊", protected=True),
    TRANSACTIONS: Route(TRANSACTIONS, "Transactions", "💳", protected=True),
    BUDGETS: Route(BUDGETS, "Budgets", "💰", protected=True),
    GOALS: Route(GOALS, "Goals", "🎯", protected=True),
    ANALYTICS: Route(ANALYTICS, "Analytics", "📈", protected=True),
    PROFILE: Route(PROFILE, "Profile", "👤", protected=True),
}

# order of the signed-in navigation links
NAV_AUTHENTICATED = [DASHBOARD, TRANSACTIONS, BUDGETS, GOALS, ANALYTICS, PROFILE]
NAV_ANONYMOUS = [LOGIN, REGISTER]


def normalize_path(path):
    """'dashboard', '/dashboard/' and '/dashboard' all become '/dashboard'"""
    path = (path or "").strip().strip("/")
    return "/" + path.lower() if path else HOME


def resolve(path, is_authenticated):
    """Return the path that should actually be rendered.

    Unknown paths go to the landing view; protected paths go to the login
    view when nobody is signed in.
    """
    path = normalize_path(path)
    route = ROUTES.get(path)
    if route is None:
        return HOME
    if route.protected and not is_authenticated:
        return LOGIN
    return path
