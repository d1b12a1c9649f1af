"""Views over a ``ProjectionResult`` — summary cards, table, chart.

The engine output is uniformly month-granular; frequency-dependent
filtering and labelling live here.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from compound_projector.config.inputs import DepositFrequency, DurationUnit
from compound_projector.models.results import ProjectionResult, SummaryFigures, TableRow
from compound_projector.presentation.formatting import (
    Language,
    axis_tick,
    format_currency,
    format_period,
)

SERIES_COLORS = {
    "total": "#8884d8",
    "cumulative_deposits": "#82ca9d",
    "profit": "#ffc658",
}

SERIES_NAMES = {
    "total": "Total",
    "cumulative_deposits": "Deposits",
    "profit": "Profit",
}


def summary_figures(result: ProjectionResult) -> SummaryFigures:
    return SummaryFigures(
        final_amount=result.final_amount,
        total_deposits=result.total_deposits,
        total_profit=result.total_profit,
        profit_after_tax=result.profit_after_tax,
        final_amount_after_tax=result.final_amount_after_tax,
    )


def table_rows(result: ProjectionResult, deposit_frequency: DepositFrequency) -> list[TableRow]:
    """Rows to display: every month, or only year-ends for yearly deposits."""
    rows: list[TableRow] = []
    for rec in result.monthly_details:
        if deposit_frequency == "yearly":
            if rec.period % 12 != 0:
                continue
            label = rec.period // 12
        else:
            label = rec.period
        rows.append(TableRow(
            label=label,
            period=rec.period,
            cumulative_deposits=rec.cumulative_deposits,
            profit=rec.profit,
            total=rec.total,
        ))
    return rows


def details_frame(result: ProjectionResult) -> pd.DataFrame:
    """Full month-by-month series, one row per period."""
    return pd.DataFrame(
        [rec.model_dump() for rec in result.monthly_details],
        columns=["period", "cumulative_deposits", "profit", "total"],
    )


def table_frame(
    rows: list[TableRow],
    deposit_frequency: DepositFrequency,
    currency_symbol: str = "₪",
) -> pd.DataFrame:
    """Display-ready table with formatted currency columns."""
    period_header = "Period (months)" if deposit_frequency == "monthly" else "Period (years)"
    return pd.DataFrame({
        period_header: [r.label for r in rows],
        "Deposits": [format_currency(r.cumulative_deposits, currency_symbol) for r in rows],
        "Profit": [format_currency(r.profit, currency_symbol) for r in rows],
        "Total": [format_currency(r.total, currency_symbol) for r in rows],
    })


def build_growth_chart(
    result: ProjectionResult,
    duration_unit: DurationUnit,
    currency_symbol: str = "₪",
    language: Language = "en",
) -> go.Figure:
    """Line chart of total, deposits and profit against period.

    The x-axis keeps month resolution; tick text collapses to whole
    years when the duration was given in years.
    """
    frame = details_frame(result)
    periods = frame["period"].tolist()
    hover_labels = [format_period(p, language) for p in periods]

    fig = go.Figure()
    for column in ("total", "cumulative_deposits", "profit"):
        fig.add_trace(go.Scatter(
            x=periods,
            y=frame[column].tolist(),
            mode="lines",
            name=SERIES_NAMES[column],
            line=dict(color=SERIES_COLORS[column], width=2),
            customdata=[
                [label, format_currency(v, currency_symbol)]
                for label, v in zip(hover_labels, frame[column])
            ],
            hovertemplate="%{customdata[0]}<br>%{customdata[1]}<extra>" + SERIES_NAMES[column] + "</extra>",
        ))

    if duration_unit == "years" and periods:
        tick_vals = [p for p in periods if p % 12 == 0] or [periods[-1]]
        fig.update_xaxes(
            tickmode="array",
            tickvals=tick_vals,
            ticktext=[str(axis_tick(p, duration_unit)) for p in tick_vals],
            title_text="Years",
        )
    else:
        fig.update_xaxes(title_text="Months")

    fig.update_layout(
        yaxis_title=f"Amount ({currency_symbol})",
        height=320,
        margin=dict(l=20, r=20, t=30, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
