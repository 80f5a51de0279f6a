# smartfin/views/goals.py
from datetime import date

import streamlit as st

from smartfin import services
from smartfin.analytics import goal_progress
from smartfin.errors import ApiError
from smartfin.formatting import format_currency, format_date
from smartfin.validation import validate_goal

SHOW_FORM_KEY = "goal_show_form"
EDITING_KEY = "goal_editing"
ERROR_KEY = "goal_error"


def submit_goal(session, form, editing_id=None):
    """Validate and send the goal form; returns an error message or None"""
    payload, error = validate_goal(
        form.get("title"), form.get("targetAmount"), form.get("savedAmount"), form.get("deadline"),
    )
    if error:
        return error
    try:
        if editing_id:
            services.update_goal(session.token, editing_id, payload)
        else:
            services.create_goal(session.token, payload)
    except ApiError as e:
        return str(e)
    return None


def _reset_form():
    st.session_state[SHOW_FORM_KEY] = False
    st.session_state[EDITING_KEY] = None
    st.session_state[ERROR_KEY] = None


def render_goal_card(goal):
    progress = goal_progress(goal)
    with st.container(border=True):
        col_title, col_edit = st.columns([5, 1])
        with col_title:
            st.markdown(f"### {goal.title}")
            if goal.is_completed:
                st.markdown(":green[✅ **Completed**]")
            st.caption(f"Deadline: {format_date(goal.deadline)}")
        if col_edit.button("✏️", key=f"edit_goal_{goal.id}", help=f"Edit {goal.title}"):
            st.session_state[SHOW_FORM_KEY] = True
            st.session_state[EDITING_KEY] = goal
            st.session_state[ERROR_KEY] = None
            st.rerun()

        col_saved, col_target = st.columns(2)
        col_saved.write(f"**{format_currency(goal.saved_amount)}**")
        col_target.write(f"Target: {format_currency(goal.target_amount)}")
        st.progress(progress.bar_fraction)
        st.caption(progress.label())


def render_form(session):
    editing = st.session_state.get(EDITING_KEY)
    initial = editing.to_form() if editing else {
        "title": "", "targetAmount": "", "savedAmount": "", "deadline": "",
    }
    form_id = editing.id if editing else "new"
    default_deadline = date.fromisoformat(initial["deadline"]) if initial["deadline"] else date.today()

    with st.container(border=True):
        st.subheader("Edit Goal" if editing else "Create a New Goal")
        with st.form(f"goal_form_{form_id}"):
            col_a, col_b = st.columns(2)
            with col_a:
                title = st.text_input("🎯 Goal Title", value=initial["title"], placeholder="e.g., Vacation")
                target = st.text_input("💰 Target Amount", value=initial["targetAmount"])
            with col_b:
                deadline = st.date_input("📅 Deadline", value=default_deadline)
                saved = st.text_input("🏦 Saved Amount", value=initial["savedAmount"])

            col_submit, col_cancel = st.columns(2)
            submitted = col_submit.form_submit_button(
                "💾 Update Goal" if editing else "💾 Save Goal", use_container_width=True)
            cancelled = col_cancel.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        _reset_form()
        st.rerun()

    if submitted:
        form = {"title": title, "targetAmount": target, "savedAmount": saved, "deadline": deadline}
        error = submit_goal(session, form, editing.id if editing else None)
        if error:
            st.session_state[ERROR_KEY] = error
        else:
            _reset_form()
        st.rerun()


def render(session):
    col_title, col_action = st.columns([3, 1])
    col_title.header("🎯 Financial Goals")

    show_form = st.session_state.get(SHOW_FORM_KEY, False)
    editing = st.session_state.get(EDITING_KEY)
    if col_action.button("Cancel" if show_form and not editing else "➕ New Goal",
                         use_container_width=True, key="goal_toggle"):
        opening = not (show_form and not editing)
        _reset_form()
        st.session_state[SHOW_FORM_KEY] = opening
        st.rerun()

    error = st.session_state.get(ERROR_KEY)
    if error:
        st.error(f"❌ {error}")

    if show_form:
        render_form(session)

    try:
        with st.spinner("🔄 Loading goals..."):
            goals = services.list_goals(session.token)
    except ApiError as e:
        st.error(f"❌ {e}")
        return

    if not goals:
        with st.container(border=True):
            st.markdown("### 🎯 No Goals Yet")
            st.caption("Start by creating a new financial goal.")
        return

    columns = st.columns(3)
    for i, goal in enumerate(goals):
        with columns[i % 3]:
            render_goal_card(goal)
