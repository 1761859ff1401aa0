"""Plotly figures for the amortization schedule."""

import plotly.graph_objects as go

from mortgage_calc.dashboard.equations import COLORS
from mortgage_calc.formatting import dollar, pct
from mortgage_calc.models.loan import LoanInputs, ScheduleResult

RATE_LINE_COLOR = "#7a46ff"


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text="No data available",
        showarrow=False,
        xref="paper", yref="paper",
        x=0.5, y=0.5,
        font=dict(size=16, color="#888"),
    )
    fig.update_layout(xaxis=dict(visible=False), yaxis=dict(visible=False))
    return fig


def build_schedule_figure(
    result: ScheduleResult,
    inputs: LoanInputs,
    granularity: str = "annual",
) -> go.Figure:
    """Stacked interest/principal bars with the annual rate as a reference line.

    ``granularity`` is "annual" (one bar per year) or "monthly" (one per month).
    """
    if result.is_empty:
        return _empty_figure()

    if granularity == "monthly":
        rows = result.monthly_schedule
        labels = [f"Month {r.period}" for r in rows]
    else:
        rows = result.annual_schedule
        labels = [f"Year {r.year}" for r in rows]

    rate = float(inputs.rate)

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=[float(r.interest_portion) for r in rows],
        name="Interest Payment",
        marker_color=COLORS["INT"],
        hovertemplate="%{x}<br>Interest: $%{y:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        x=labels,
        y=[float(r.principal_portion) for r in rows],
        name="Principal Amortization",
        marker_color=COLORS["PRN"],
        customdata=[float(r.remaining_balance) for r in rows],
        hovertemplate="%{x}<br>Principal: $%{y:,.2f}<br>Remaining: $%{customdata:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[rate] * len(rows),
        name="Interest Rate (r)",
        mode="lines",
        yaxis="y2",
        line=dict(color=RATE_LINE_COLOR, width=2, dash="dash"),
        hovertemplate="Rate: %{y}%<extra></extra>",
    ))
    fig.update_layout(
        title=(
            f"Amortization Schedule: {dollar(inputs.principal, 0)} loan, "
            f"{inputs.years} years, {pct(inputs.rate)} annual"
        ),
        barmode="stack",
        xaxis_title="Month" if granularity == "monthly" else "Year",
        yaxis_title="Payment ($)",
        yaxis2=dict(
            title="Interest Rate (%)",
            overlaying="y",
            side="right",
            range=[0, rate * 2],
            showgrid=False,
        ),
        hovermode="x unified",
        legend=dict(orientation="h", y=-0.2),
    )
    return fig
