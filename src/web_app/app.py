import streamlit as st
import uuid
from src.core.config import SETTINGS
from src.utils.logging import setup_logging
from src.pages import projection

# Setup logging
setup_logging(SETTINGS.log_level)

st.set_page_config(page_title="Future Wealth Calculator", layout="wide")

# Session initialization
def _init_session() -> None:
    st.session_state.setdefault("session_id", str(uuid.uuid4()))

_init_session()

with st.sidebar:
    st.caption(f"Environment: {SETTINGS.env}")
    st.caption(f"Session: {st.session_state['session_id']}")

# Main UI
st.title("Future Wealth Calculator (INR)")

projection.render()
