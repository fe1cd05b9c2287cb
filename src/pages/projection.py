import streamlit as st
from typing import Any, Dict, Optional

from src.core.config import SETTINGS
from src.core.schemas import INPUT_FIELDS, default_inputs, default_values
from src.tools.projection_tools import normalize_payload
from src.utils.logging import get_logger, start_run
from src.utils.projection_engine import project, summarize
from src.utils.projection_models import ProjectionResult, ProjectionSummary
from src.web_app.ui_helpers import build_wealth_chart, results_frame, summary_lines

log = get_logger(__name__)


def _compute(values: Dict[str, Any]) -> None:
    start_run("web")
    inp = default_inputs(normalize_payload(values))
    result = project(inp)
    st.session_state["_projection"] = result
    st.session_state["_projection_summary"] = summarize(result)
    log.info("recalculated years=%s", inp.years)


def render():
    st.subheader("Inputs")

    defaults = default_values()
    values: Dict[str, Any] = {}
    cols = st.columns(4)
    for i, f in enumerate(INPUT_FIELDS):
        with cols[i % 4]:
            if f.integer:
                values[f.key] = st.number_input(f.label, value=int(float(defaults[f.key])), step=int(f.step), key=f"in_{f.key}")
            else:
                values[f.key] = st.number_input(f.label, value=float(defaults[f.key]), step=float(f.step), key=f"in_{f.key}")

    clicked = st.button("Calculate", type="primary")

    if clicked or "_projection" not in st.session_state:
        try:
            _compute(values)
        except ValueError as e:
            st.error(f"Projection failed: {e}")
            return

    result: Optional[ProjectionResult] = st.session_state.get("_projection")
    summary: Optional[ProjectionSummary] = st.session_state.get("_projection_summary")
    if not result or not result.series:
        st.info("Nothing to show for a zero-year period.")
        return

    st.subheader("Results")
    fig = build_wealth_chart(results_frame(result), height=SETTINGS.chart_height)
    st.plotly_chart(fig, use_container_width=True)

    st.markdown("### Final Results:")
    for line in summary_lines(summary):
        st.markdown(f"- {line}")
