import streamlit as st

from common.constants import APP_NAME, SETTINGS_LABELS
from common.ui import app_state, apply_theme, dispatch, sidebar_header
from controllers import view_controller as vc

st.set_page_config(page_title=f"{APP_NAME} — Settings", layout="wide")


def main():
    state = app_state()
    apply_theme(state)
    sidebar_header(state, show_feeds=False)

    st.header("⚙️ Settings")
    st.caption("Preferences last for this browser session only.")

    for key, (label, desc) in SETTINGS_LABELS.items():
        st.toggle(
            label,
            value=getattr(state.settings, key),
            help=desc,
            key=f"setting_{key}",
            on_change=dispatch,
            args=(vc.toggle_setting, key),
        )

    if st.button("Done", type="primary"):
        st.switch_page("main.py")


if __name__ == "__main__":
    main()
