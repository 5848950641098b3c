"""Visualization components using Plotly for the tax comparator."""

from typing import Optional
import plotly.graph_objects as go
import pandas as pd

from modules.tax.models import TaxComparison
from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)

# ========================================
# CHART STYLING CONSTANTS
# ========================================

DESKTOP_HEIGHT = 420
MOBILE_HEIGHT = 300

CHART_TITLE_FONT = dict(size=18, family="JetBrains Mono", color="#e6e6e6")
CHART_LEGEND_FONT = dict(color='#E5E7EB', family="Inter")

CHART_HOVER_LABEL = dict(
    bgcolor='rgba(17, 24, 39, 0.95)',
    bordercolor='#4B7DA3',
    font_size=13,
    font_family='JetBrains Mono'
)

# One colour per tax component, baseline vs. alternative lines
COMPONENT_COLORS = {
    "Income tax": 'rgba(248, 113, 113, 0.75)',
    "Social security": 'rgba(245, 158, 11, 0.70)',
    "VAT": 'rgba(124, 58, 237, 0.65)',
}
BASELINE_COLOR = 'rgba(248, 113, 113, 0.9)'
ALTERNATIVE_COLOR = 'rgba(16, 185, 129, 0.9)'


def _base_layout(fig: go.Figure, title: Optional[str], compact_mode: bool) -> go.Figure:
    title_dict = dict(text="") if not title else dict(text=title, x=0, xref="container", font=CHART_TITLE_FONT)
    fig.update_layout(
        title=title_dict,
        height=MOBILE_HEIGHT if compact_mode else DESKTOP_HEIGHT,
        margin=dict(t=40 if title else 10, b=30, l=30 if compact_mode else 50, r=20),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1,
            font=dict(**CHART_LEGEND_FONT, size=9 if compact_mode else 11),
            bgcolor='rgba(0,0,0,0)',
        ),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", color="#9CA3AF"),
        hoverlabel=CHART_HOVER_LABEL,
    )
    return fig


def create_component_chart(
    comparison: TaxComparison,
    title: str = "Where the money goes",
    compact_mode: bool = False
) -> go.Figure:
    """
    Stacked bars of tax components per jurisdiction, with net income on top.
    """
    breakdowns = [comparison.baseline, comparison.alternative]
    names = [b.jurisdiction for b in breakdowns]

    fig = go.Figure()
    for label, field in [("Income tax", "income_tax"), ("Social security", "social_security"), ("VAT", "vat")]:
        fig.add_trace(go.Bar(
            name=label,
            x=names,
            y=[float(getattr(b, field)) for b in breakdowns],
            marker_color=COMPONENT_COLORS[label],
            hovertemplate=f'<b>{label}</b><br>' + '%{y:,.0f} €<extra></extra>',
        ))

    fig.add_trace(go.Bar(
        name="Net income",
        x=names,
        y=[max(float(b.net_income), 0.0) for b in breakdowns],
        marker_color='rgba(52, 211, 153, 0.55)',
        hovertemplate='<b>Net income</b><br>%{y:,.0f} €<extra></extra>',
    ))

    fig.update_layout(barmode='stack', yaxis=dict(tickformat=",.0f", gridcolor='rgba(75,125,163,0.15)'))
    return _base_layout(fig, title, compact_mode)


def create_savings_curve_chart(
    curve_df: pd.DataFrame,
    current_income: Optional[float] = None,
    baseline_label: str = "Spain",
    alternative_label: str = "US LLC",
    title: str = "Total taxes by income",
    compact_mode: bool = False
) -> go.Figure:
    """
    Line chart of total taxes for both regimes across incomes.

    Args:
        curve_df: Output of modules.tax.comparison.savings_curve
        current_income: Draws a marker line at the selected income
    """
    if curve_df.empty:
        logger.warning("Savings curve is empty, returning blank chart")
        return go.Figure()

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=curve_df["gross_income"],
        y=curve_df["baseline_total"],
        mode="lines",
        name=baseline_label,
        line=dict(color=BASELINE_COLOR, width=3),
        hovertemplate='%{x:,.0f} € → %{y:,.0f} €<extra>' + baseline_label + '</extra>',
    ))
    fig.add_trace(go.Scatter(
        x=curve_df["gross_income"],
        y=curve_df["alternative_total"],
        mode="lines",
        name=alternative_label,
        line=dict(color=ALTERNATIVE_COLOR, width=3),
        fill="tonexty",
        fillcolor='rgba(16, 185, 129, 0.10)',
        hovertemplate='%{x:,.0f} € → %{y:,.0f} €<extra>' + alternative_label + '</extra>',
    ))

    if current_income is not None:
        fig.add_vline(x=current_income, line_dash="dash", line_color="#4B7DA3")

    fig.update_layout(
        xaxis=dict(title="Gross annual income", tickformat=",.0f", gridcolor='rgba(75,125,163,0.15)'),
        yaxis=dict(title="Taxes per year", tickformat=",.0f", gridcolor='rgba(75,125,163,0.15)'),
        hovermode="x unified",
    )
    return _base_layout(fig, title, compact_mode)
