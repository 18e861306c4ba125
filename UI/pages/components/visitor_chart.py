"""
Visitor area chart (desktop and mobile) for a selectable recent range.
"""

import plotly.graph_objects as go

from utils.visitor_series import visitor_frame, last_n_days


def create_visitor_figure(rows, days):
    df = last_n_days(visitor_frame(rows), days)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df.index, y=df['mobile'], name="Mobile", mode="lines",
        stackgroup="visitors", line={"color": "#60a5fa", "shape": "spline"},
    ))
    fig.add_trace(go.Scatter(
        x=df.index, y=df['desktop'], name="Desktop", mode="lines",
        stackgroup="visitors", line={"color": "#2563eb", "shape": "spline"},
    ))
    fig.update_layout(
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        height=280,
        hovermode="x unified",
        plot_bgcolor="white",
        legend={"orientation": "h", "y": -0.15},
    )
    fig.update_xaxes(showgrid=False, tickformat="%b %d")
    fig.update_yaxes(showgrid=True, gridcolor="#f1f5f9", rangemode="tozero")
    if df.empty:
        fig.add_annotation(text="No visitor data yet", showarrow=False,
                           xref="paper", yref="paper", x=0.5, y=0.5)
    return fig
