"""Compound Interest Projector — Streamlit dashboard.

Layout: sidebar form → main area with summary cards, details table and
growth chart.  The form is restored from the last session on start and
saved again whenever it changes.

Run with:
    streamlit run src/compound_projector/dashboard/app.py
"""

from __future__ import annotations

import streamlit as st

from compound_projector.api.narrative import generate_narrative
from compound_projector.config import AppSettings, CalculatorForm
from compound_projector.engine.projection import TAX_RATE, project
from compound_projector.errors import InvalidInput
from compound_projector.logging_setup import configure_logging
from compound_projector.presentation.formatting import format_currency
from compound_projector.presentation.views import (
    build_growth_chart,
    summary_figures,
    table_frame,
    table_rows,
)
from compound_projector.storage.state import InputStore

settings = AppSettings.from_env()
configure_logging(settings.log_level)
store = InputStore(settings.state_path)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Compound Interest Calculator", page_icon="📈", layout="wide")


def _card(label: str, value: str, accent: str) -> str:
    """Return HTML for a metric card with a coloured top accent."""
    return f"""
    <div style="
        border: 1px solid rgba(128,128,128,0.15);
        border-top: 3px solid {accent};
        border-radius: 8px;
        padding: 12px 14px 10px;
        text-align: center;
    ">
        <div style="font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.6px; opacity: 0.6;">{label}</div>
        <div style="font-size: 1.25rem; font-weight: 700; color: {accent};">{value}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Form state — loaded once per session, saved on every change
# ---------------------------------------------------------------------------
if "form" not in st.session_state:
    st.session_state["form"] = store.load()
saved: CalculatorForm = st.session_state["form"]

st.title("Compound Interest Calculator")
st.info(
    "This calculator gives an estimate only and is not financial or investment advice. "
    "Results rest on simplified assumptions and may differ from reality. "
    "Consult a licensed financial adviser before making investment decisions."
)

st.sidebar.header("Inputs")
initial_amount = st.sidebar.text_input("Initial amount", saved.initial_amount, placeholder="0")
interest_rate = st.sidebar.text_input("Annual interest rate (%)", saved.interest_rate, placeholder="0")
periodic_deposit = st.sidebar.text_input("Deposit amount", saved.periodic_deposit, placeholder="0")

_FREQS = ["monthly", "yearly"]
deposit_frequency = st.sidebar.radio(
    "Deposit frequency", _FREQS,
    index=_FREQS.index(saved.deposit_frequency),
    format_func=str.capitalize,
    horizontal=True,
)

c1, c2 = st.sidebar.columns(2)
duration = c1.text_input("Duration", saved.duration, placeholder="0")
_UNITS = ["months", "years"]
duration_unit = c2.selectbox(
    "Unit", _UNITS,
    index=_UNITS.index("years" if deposit_frequency == "yearly" else saved.duration_unit),
    disabled=(deposit_frequency == "yearly"),
    help="Yearly deposits are always projected over whole years.",
)

form = saved.update(
    initial_amount=initial_amount,
    interest_rate=interest_rate,
    periodic_deposit=periodic_deposit,
    deposit_frequency=deposit_frequency,
    duration=duration,
    duration_unit=duration_unit,
)
if form != saved:
    st.session_state["form"] = form
    store.save(form)

calc_clicked = st.sidebar.button(
    "Calculate", type="primary", use_container_width=True, disabled=not form.ready,
)

if calc_clicked:
    try:
        inputs = form.to_inputs(max_total_months=settings.max_total_months)
        st.session_state["projection"] = (inputs, project(inputs))
    except InvalidInput as exc:
        st.session_state.pop("projection", None)
        for message in exc.errors:
            st.sidebar.error(message)

if "projection" not in st.session_state:
    st.caption("Fill in the deposit and duration, then click **Calculate**.")
    st.stop()

# ---------------------------------------------------------------------------
# Results — always rendered from the inputs that were calculated, not the
# form as currently edited
# ---------------------------------------------------------------------------
inputs, result = st.session_state["projection"]
sym = settings.currency_symbol
figs = summary_figures(result)

cards = [
    ("Final amount", figs.final_amount, "#8884d8"),
    ("Total deposits", figs.total_deposits, "#82ca9d"),
    ("Profit", figs.total_profit, "#ffc658"),
    (f"Profit after tax ({TAX_RATE:.0%})", figs.profit_after_tax, "#ffc658"),
    ("Final amount after tax", figs.final_amount_after_tax, "#8884d8"),
]
for col, (label, value, accent) in zip(st.columns(len(cards)), cards):
    col.markdown(_card(label, format_currency(value, sym), accent), unsafe_allow_html=True)

st.divider()
table_col, chart_col = st.columns([2, 3])

with table_col:
    rows = table_rows(result, inputs.deposit_frequency)
    st.dataframe(
        table_frame(rows, inputs.deposit_frequency, sym),
        hide_index=True,
        use_container_width=True,
        height=400,
    )

with chart_col:
    fig = build_growth_chart(result, inputs.duration_unit, sym, settings.language)
    st.plotly_chart(fig, use_container_width=True)

with st.expander("Show summary text"):
    st.text(generate_narrative(inputs, result, sym))
