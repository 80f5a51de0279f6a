"""SmartFin: Streamlit client for the SmartFin personal-finance API."""

__version__ = "0.1.0"
