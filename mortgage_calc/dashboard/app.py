"""Plotly Dash application: the mortgage calculator UI."""

import logging

from dash import Dash, html, page_container

from mortgage_calc.config import settings

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Mortgage Calculator",
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1("Mortgage Calculator", style={"fontSize": "1.5rem", "margin": "0"}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    app.run(debug=settings.debug, host=settings.dashboard_host, port=settings.dashboard_port)


if __name__ == "__main__":
    main()
