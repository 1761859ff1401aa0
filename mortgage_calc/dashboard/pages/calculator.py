"""Calculator page: loan form, payment summary, chart/table views and formulas.

Features:
  - Debounced inputs accepting thousands separators
  - Validation summary listing every out-of-range field
  - Chart (annual or monthly bars) / table (annual rows with monthly drill-down) toggle
  - Live announcements of input and payment changes
  - Worked PMT / INT / PRN equations for month 1
"""

import logging

import dash
from dash import html, dcc, callback, Input, Output, State, ALL, no_update

from mortgage_calc.config import settings
from mortgage_calc.dashboard.charts import build_schedule_figure
from mortgage_calc.dashboard.equations import COLORS, build_equations
from mortgage_calc.dashboard.schemas import InputSnapshot, SummarySnapshot
from mortgage_calc.dashboard.summary import (
    announce_changes,
    build_summary,
    changed_fields,
    describe_input_change,
)
from mortgage_calc.dashboard.tables import COLUMNS, schedule_rows, toggle_year
from mortgage_calc.engine.amortization import calculate
from mortgage_calc.engine.inputs import parse_inputs, parse_number
from mortgage_calc.engine.validation import validate_all
from mortgage_calc.formatting import dollar, plain
from mortgage_calc.models.loan import ScheduleResult

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/", name="Calculator")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}
HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}
ALERT_STYLE = {
    "backgroundColor": "#fdecea",
    "border": "1px solid #e94560",
    "borderRadius": "8px",
    "padding": "0.75rem 1rem",
    "marginBottom": "1rem",
}

DEBOUNCE_SECONDS = settings.input_debounce_ms / 1000

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, htmlFor=component.id, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


layout = html.Div([
    html.H2("Mortgage Payment Calculator"),

    dcc.Store(id="summary-store", storage_type="memory"),
    dcc.Store(id="inputs-store", storage_type="memory"),
    dcc.Store(id="expanded-years", storage_type="memory", data=[]),

    # --- Loan form ---
    html.Div([
        _field("Loan Amount ($)", dcc.Input(
            id="principal", type="text", inputMode="decimal",
            value=f"{settings.default_principal:,.0f}",
            debounce=DEBOUNCE_SECONDS, style=FIELD_STYLE,
        )),
        _field("Interest Rate (%)", dcc.Input(
            id="rate", type="text", inputMode="decimal",
            value=plain(settings.default_rate),
            debounce=DEBOUNCE_SECONDS, style=FIELD_STYLE,
        )),
        _field("Loan Term (years)", dcc.Input(
            id="years", type="text", inputMode="numeric",
            value=str(settings.default_years),
            debounce=DEBOUNCE_SECONDS, style=FIELD_STYLE,
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "1rem"}),

    # --- Validation summary ---
    html.Div(id="validation-summary", children=[
        html.Strong("Please correct the following:"),
        html.Ul(id="validation-list"),
    ], role="alert", style={**ALERT_STYLE, **HIDDEN}),

    # --- Summary ---
    html.Div(id="results-content", style={"marginBottom": "1.5rem"}),
    html.Div(id="result-announcement", role="status", **{"aria-live": "polite"},
             style={"fontSize": "0.85rem", "color": "#666", "minHeight": "1.2rem"}),

    # --- View toggle ---
    html.Div([
        dcc.RadioItems(
            id="view-mode",
            options=[
                {"label": " Chart", "value": "chart"},
                {"label": " Table", "value": "table"},
            ],
            value="chart",
            inline=True,
        ),
        dcc.RadioItems(
            id="chart-granularity",
            options=[
                {"label": " Annual", "value": "annual"},
                {"label": " Monthly", "value": "monthly"},
            ],
            value="annual",
            inline=True,
        ),
    ], style={"display": "flex", "gap": "2rem", "margin": "1rem 0"}),

    html.Div(id="chart-container", children=[dcc.Graph(id="schedule-chart")]),
    html.Div(id="table-container", children=[html.Div(id="schedule-table")], style=HIDDEN),

    # --- Equations ---
    html.H3("How it's calculated", style={"marginTop": "2rem"}),
    html.Div(id="equations"),
])


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _metric_card(label, value, color):
    return html.Div([
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold", "color": color}),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ], style={
        "backgroundColor": "white",
        "border": "1px solid #ddd",
        "borderRadius": "8px",
        "padding": "1rem 1.5rem",
        "minWidth": "150px",
        "textAlign": "center",
    })


def _build_summary_cards(figures):
    return html.Div([
        _metric_card("Monthly Payment", dollar(figures.monthly_payment, 0), COLORS["PMT"]),
        _metric_card("Total Interest", dollar(figures.total_interest, 0), COLORS["INT"]),
        _metric_card("Total Paid", dollar(figures.total_paid, 0), COLORS["PRN"]),
    ], style={"display": "flex", "gap": "1rem", "flexWrap": "wrap"})


def _cell(value, color=None, bold=False):
    style = {"padding": "0.4rem 0.6rem", "textAlign": "right"}
    if color:
        style["color"] = color
    if bold:
        style["fontWeight"] = "600"
    return html.Td(dollar(value), style=style)


def _build_table(result: ScheduleResult, expanded_years):
    header = html.Tr([html.Th(c) for c in COLUMNS])
    rows = schedule_rows(result, expanded_years)
    if not rows:
        body = [html.Tr(html.Td("No data available", colSpan=len(COLUMNS),
                                style={"textAlign": "center", "padding": "1rem"}))]
    else:
        body = []
        for row in rows:
            is_year = row.kind == "year"
            if is_year:
                label = html.Td([
                    html.Button(
                        "▼" if row.expanded else "▶",
                        id={"type": "expand-year", "year": row.year},
                        n_clicks=0,
                        title=f"{'Collapse' if row.expanded else 'Expand'} year {row.year}",
                        **{"aria-expanded": "true" if row.expanded else "false"},
                        style={"border": "none", "background": "none", "cursor": "pointer"},
                    ),
                    html.Span(row.label),
                ], style={"whiteSpace": "nowrap"})
            else:
                label = html.Td(row.label, style={"paddingLeft": "2rem", "color": "#666"})
            body.append(html.Tr([
                label,
                _cell(row.principal, COLORS["PRN"], is_year),
                _cell(row.interest, COLORS["INT"], is_year),
                _cell(row.total_payment, COLORS["PMT"], is_year),
                _cell(row.remaining_balance),
            ], style={} if is_year else {"backgroundColor": "#fafafa", "fontSize": "0.85rem"}))
    return html.Table(
        [html.Thead(header), html.Tbody(body)],
        id="data-table",
        tabIndex="0",
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )


def _build_equations(result, inputs):
    blocks = []
    for eq in build_equations(result, inputs):
        blocks.append(html.Div([
            html.H4(eq.name, style={"color": COLORS[eq.name], "margin": "0 0 0.5rem"}),
            dcc.Markdown(f"$${eq.symbolic}$$", mathjax=True),
            dcc.Markdown(f"$${eq.substituted}$$", mathjax=True),
            html.Div(eq.display_value, role="status", style={"fontWeight": "bold", "fontSize": "1.1rem"}),
            html.Div(eq.caption, style={"fontSize": "0.8rem", "color": "#666"}),
        ], style={
            "backgroundColor": "#f5f5f5",
            "padding": "1rem",
            "borderRadius": "8px",
            "flex": "1",
            "minWidth": "260px",
            "textAlign": "center",
        }))
    return html.Div(blocks, style={"display": "flex", "gap": "1rem", "flexWrap": "wrap"})


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    [
        Output("validation-summary", "style"),
        Output("validation-list", "children"),
        Output("results-content", "children"),
        Output("schedule-chart", "figure"),
        Output("chart-container", "style"),
        Output("table-container", "style"),
        Output("schedule-table", "children"),
        Output("equations", "children"),
        Output("result-announcement", "children"),
        Output("summary-store", "data"),
        Output("inputs-store", "data"),
    ],
    [
        Input("principal", "value"),
        Input("rate", "value"),
        Input("years", "value"),
        Input("view-mode", "value"),
        Input("chart-granularity", "value"),
        Input("expanded-years", "data"),
    ],
    [
        State("summary-store", "data"),
        State("inputs-store", "data"),
    ],
)
def update_calculator(principal, rate, years, view_mode, granularity, expanded_years,
                      summary_data, inputs_data):
    raw = {"principal": principal, "rate": rate, "years": years}
    current_inputs = InputSnapshot(**{k: parse_number(v) for k, v in raw.items()})
    previous_inputs = InputSnapshot.model_validate(inputs_data) if inputs_data else None
    previous_summary = SummarySnapshot.model_validate(summary_data) if summary_data else None

    loan = parse_inputs(principal, rate, years)
    errors = validate_all(raw)
    if errors:
        logger.warning("Loan form invalid: %s", errors)
        result = ScheduleResult.empty()
    else:
        result = calculate(loan)

    announcements = [
        describe_input_change(f, getattr(current_inputs, f))
        for f in changed_fields(previous_inputs, current_inputs)
    ]
    announcements.extend(announce_changes(previous_summary, result))

    summary_style = {**ALERT_STYLE, **(SHOWN if errors else HIDDEN)}
    is_table = view_mode == "table"

    return (
        summary_style,
        [html.Li(msg) for msg in errors.values()],
        _build_summary_cards(build_summary(result, loan)),
        build_schedule_figure(result, loan, granularity) if not is_table else no_update,
        HIDDEN if is_table else SHOWN,
        SHOWN if is_table else HIDDEN,
        _build_table(result, expanded_years or []),
        _build_equations(result, loan),
        ". ".join(announcements),
        SummarySnapshot.from_result(result).model_dump(mode="json"),
        current_inputs.model_dump(mode="json"),
    )


@callback(
    Output("expanded-years", "data"),
    Input({"type": "expand-year", "year": ALL}, "n_clicks"),
    State("expanded-years", "data"),
    prevent_initial_call=True,
)
def toggle_year_rows(n_clicks, expanded_years):
    # Re-rendered buttons fire with n_clicks=0; only real clicks count
    triggered = dash.ctx.triggered_id
    if not triggered or not dash.ctx.triggered[0]["value"]:
        return no_update
    return toggle_year(expanded_years, triggered["year"])
