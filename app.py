"""
Streamlit UI for the protocol coverage fund model.

Single-page app that:

- Reads six inputs from the sidebar, clamped to their documented ranges
- Re-runs the simulation whenever any input changes
- Shows a KPI strip, a chart tab and a monthly table tab
- Exports the chart as PNG and the table as CSV
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from coverage_engine.engine.config import BOUNDS, DEFAULTS, INT_FIELDS, STEPS, clamp, config_from_dict
from coverage_engine.engine.errors import InvalidConfiguration
from ui.diagnostics import first_expiry, lapsed_days
from ui.export import chart_figure, chart_png, table_csv
from ui.formatting import format_currency, parse_currency
from ui.scenarios import ScenarioParams, run_scenario, summarize_scenario

# ---------------------------------------------------------------------------
# Controls
# ---------------------------------------------------------------------------

CONTROLS = [
    # (field, label, suffix, money)
    ("timescale_months", "Timescale", "months", False),
    ("premium_value", "Premium Value", None, True),
    ("purchase_cadence_days", "Purchase Cadence", "days", False),
    ("policy_duration_days", "Policy Duration", "days", False),
    ("bootstrap_funding", "Bootstrap Funding", None, True),
    ("premium_cost_pct", "Premium Cost", "%", False),
]


def _cast(field: str, value: float):
    return int(value) if field in INT_FIELDS else float(value)


def _sync(field: str, source: str, parser: Optional[Callable[[str], float]] = None) -> None:
    """Copy one widget's value into the shared state and the twin widget."""
    lo, hi = BOUNDS[field]
    raw = st.session_state[f"{field}_{source}"]
    value = _cast(field, clamp(parser(raw) if parser else raw, lo, hi))
    st.session_state[field] = value
    st.session_state[f"{field}_slider"] = value
    st.session_state[f"{field}_text"] = format_currency(value) if parser else value


def number_control(field: str, label: str, suffix: Optional[str], money: bool) -> None:
    lo, hi = BOUNDS[field]
    step = STEPS[field]
    if field not in st.session_state:
        st.session_state[field] = _cast(field, DEFAULTS[field])
        st.session_state[f"{field}_slider"] = st.session_state[field]
        st.session_state[f"{field}_text"] = (
            format_currency(st.session_state[field]) if money else st.session_state[field]
        )

    st.markdown(f"**{label}**" + (f" ({suffix})" if suffix else ""))
    st.slider(
        label,
        min_value=_cast(field, lo),
        max_value=_cast(field, hi),
        step=_cast(field, step),
        key=f"{field}_slider",
        on_change=_sync,
        args=(field, "slider"),
        label_visibility="collapsed",
    )
    if money:
        st.text_input(
            label,
            key=f"{field}_text",
            on_change=_sync,
            args=(field, "text", parse_currency),
            label_visibility="collapsed",
        )
    else:
        st.number_input(
            label,
            min_value=_cast(field, lo),
            max_value=_cast(field, hi),
            step=_cast(field, step),
            key=f"{field}_text",
            on_change=_sync,
            args=(field, "text"),
            label_visibility="collapsed",
        )


# ---------------------------------------------------------------------------
# Simulation plumbing
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def _run_cached(values: Tuple[Tuple[str, float], ...]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Streamlit-cached simulation keyed on the (hashable) input values."""
    config = config_from_dict(dict(values))
    return run_scenario(config, ScenarioParams())


def _render_kpi_row(daily_df: pd.DataFrame) -> None:
    summary = summarize_scenario(daily_df)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Premium purchases", summary["purchases"])
    col2.metric("Total premiums", format_currency(summary["total_premiums"]))
    col3.metric("Coverage (end)", format_currency(summary["end_coverage"]))
    col4.metric("Peak coverage", format_currency(summary["peak_coverage"]))

    expiry = first_expiry(daily_df)
    lapses = lapsed_days(daily_df)
    notes = []
    if expiry is not None:
        notes.append(f"first expiry on day {expiry}")
    if lapses:
        notes.append(f"{len(lapses)} days with no active coverage")
    if notes:
        st.caption("; ".join(notes).capitalize())


def _render_table(monthly_df: pd.DataFrame) -> None:
    view = monthly_df.drop(columns=["Month Index"]).copy()
    for col in view.columns[1:]:
        view[col] = view[col].map(format_currency)
    st.dataframe(view, use_container_width=True, hide_index=True, height=500)


def coverage_panel() -> None:
    st.title("Beefy DAO - Protocol Coverage Fund Model")

    with st.sidebar:
        st.header("Configuration")
        st.caption("Adjust inputs to see the coverage model update in real time.")
        for control in CONTROLS:
            number_control(*control)

    values = tuple((field, st.session_state[field]) for field, *_ in CONTROLS)
    try:
        daily_df, monthly_df = _run_cached(values)
    except InvalidConfiguration as exc:
        st.error(f"Simulation failed: {exc}")
        st.stop()

    _render_kpi_row(daily_df)

    chart_tab, table_tab = st.tabs(["Chart", "Table"])
    with chart_tab:
        fig = chart_figure(monthly_df)
        st.pyplot(fig)
        st.download_button(
            label="Download chart (PNG)",
            data=chart_png(fig),
            file_name="coverage-chart.png",
            mime="image/png",
        )
        plt.close(fig)
    with table_tab:
        _render_table(monthly_df)
        st.download_button(
            label="Download table (CSV)",
            data=table_csv(monthly_df),
            file_name="coverage-table.csv",
            mime="text/csv",
        )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="Protocol Coverage Fund Model",
        layout="wide",
    )
    coverage_panel()


if __name__ == "__main__":
    main()
