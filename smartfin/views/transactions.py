# smartfin/views/transactions.py
from datetime import date

import streamlit as st

from smartfin import services
from smartfin.errors import ApiError
from smartfin.formatting import format_date, format_signed_amount
from smartfin.models import EXPENSE, INCOME, TRANSACTION_TYPES
from smartfin.validation import validate_transaction

FILTERS = {"All": None, "Income": INCOME, "Expense": EXPENSE}

SHOW_FORM_KEY = "tx_show_form"
EDITING_KEY = "tx_editing"
ERROR_KEY = "tx_error"


def filter_transactions(transactions, tx_type):
    if tx_type is None:
        return list(transactions)
    return [t for t in transactions if t.type == tx_type]


def submit_transaction(session, form, editing_id=None):
    """Validate and send the form; returns an error message or None"""
    payload, error = validate_transaction(
        form.get("title"), form.get("category"), form.get("amount"),
        form.get("type"), form.get("date"),
    )
    if error:
        return error
    try:
        if editing_id:
            services.update_transaction(session.token, editing_id, payload)
        else:
            services.create_transaction(session.token, payload)
    except ApiError as e:
        return str(e)
    return None


def type_index(tx_type):
    """Selectbox position of ``tx_type``; unknown types start on expense"""
    if tx_type in TRANSACTION_TYPES:
        return TRANSACTION_TYPES.index(tx_type)
    return TRANSACTION_TYPES.index(EXPENSE)


def _close_form():
    st.session_state[SHOW_FORM_KEY] = False
    st.session_state[EDITING_KEY] = None


def _open_form(transaction=None):
    st.session_state[SHOW_FORM_KEY] = True
    st.session_state[EDITING_KEY] = transaction
    st.session_state[ERROR_KEY] = None


def render_form(session):
    editing = st.session_state.get(EDITING_KEY)
    initial = editing.to_form() if editing else {
        "title": "", "category": "", "amount": "", "type": EXPENSE, "date": date.today().isoformat(),
    }
    form_id = editing.id if editing else "new"

    with st.container(border=True):
        st.subheader(f"{'Edit' if editing else 'Add'} Transaction")
        with st.form(f"transaction_form_{form_id}"):
            col_a, col_b = st.columns(2)
            with col_a:
                title = st.text_input("📝 Title", value=initial["title"], placeholder="e.g., Coffee")
                amount = st.text_input("💰 Amount", value=initial["amount"], placeholder="0.00")
            with col_b:
                category = st.text_input("📁 Category", value=initial["category"], placeholder="e.g., Food")
                tx_type = st.selectbox("🔸 Type", TRANSACTION_TYPES,
                                       index=type_index(initial["type"]),
                                       format_func=str.capitalize)
            default_date = date.fromisoformat(initial["date"]) if initial["date"] else date.today()
            tx_date = st.date_input("📅 Date", value=default_date)

            col_submit, col_cancel = st.columns(2)
            submitted = col_submit.form_submit_button(
                "💾 Update" if editing else "💾 Add Transaction", use_container_width=True)
            cancelled = col_cancel.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        _close_form()
        st.session_state[ERROR_KEY] = None
        st.rerun()

    if submitted:
        form = {"title": title, "category": category, "amount": amount, "type": tx_type, "date": tx_date}
        with st.spinner("Saving..."):
            error = submit_transaction(session, form, editing.id if editing else None)
        if error:
            st.session_state[ERROR_KEY] = error
        else:
            st.session_state[ERROR_KEY] = None
            _close_form()
        st.rerun()


def render_table(transactions):
    if not transactions:
        st.info("No transactions found.")
        return

    header = st.columns([3, 2, 2, 2, 1])
    for col, label in zip(header, ["Title", "Amount", "Category", "Date", "Action"]):
        col.markdown(f"**{label}**")

    for t in transactions:
        row = st.columns([3, 2, 2, 2, 1])
        row[0].write(t.title)
        color = "green" if t.is_income else "red"
        row[1].markdown(f":{color}[{format_signed_amount(t)}]")
        row[2].write(t.category)
        row[3].write(format_date(t.date))
        if row[4].button("✏️", key=f"edit_tx_{t.id}", help=f"Edit {t.title}"):
            _open_form(t)
            st.rerun()


def render(session):
    col_title, col_action = st.columns([3, 1])
    col_title.header("💳 Transactions")

    show_form = st.session_state.get(SHOW_FORM_KEY, False)
    editing = st.session_state.get(EDITING_KEY)
    toggle_label = "Cancel" if show_form and not editing else "➕ Add Transaction"
    if col_action.button(toggle_label, use_container_width=True, key="tx_toggle"):
        if show_form and not editing:
            _close_form()
        else:
            _open_form()
        st.rerun()

    error = st.session_state.get(ERROR_KEY)
    if error:
        st.error(f"❌ {error}")

    if show_form:
        render_form(session)

    with st.container(border=True):
        choice = st.radio("Show", list(FILTERS), horizontal=True, key="tx_filter")
        try:
            with st.spinner("🔄 Loading transactions..."):
                transactions = services.list_transactions(session.token)
        except ApiError as e:
            st.error(f"❌ {e}")
            return
        render_table(filter_transactions(transactions, FILTERS[choice]))
