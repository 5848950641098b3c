# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the LLC Tax Comparator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components

Every function returns an HTML string; callers pass it to
st.markdown(..., unsafe_allow_html=True).
"""

from lib.formatting import format_currency, format_percentage


def render_kpi_dashboard(metrics, title="Summary"):
    """
    Render a KPI strip as a single HTML block using CSS Grid.
    metrics: List of dicts with 'label', 'value', 'delta' (opt), 'delta_color' (opt)
    """
    items_html = ""
    for m in metrics:
        delta_html = ""
        if m.get('delta'):
            color_class = f"delta-{m.get('delta_color', 'neu')}"
            # Arrows so the direction is not conveyed by colour alone
            icon = "↑ " if m.get('delta_color') == 'pos' else "↓ " if m.get('delta_color') == 'neg' else "→ "
            delta_html = f'<div class="metric-delta {color_class}">{icon}{m["delta"]}</div>'

        items_html += '<div class="kpi-item"><div class="kpi-content-bar">'
        items_html += f'<div class="kpi-label">{m["label"]}</div>'
        items_html += f'<div class="kpi-value-row"><div class="kpi-value">{m["value"]}</div>{delta_html}</div>'
        items_html += '</div></div>'

    # Flatten string to avoid Markdown code block interpretation
    html = '<div class="kpi-board">'
    if title:
        html += f'<div class="kpi-header">{title}</div>'
    html += '<div class="kpi-grid">'
    html += items_html
    html += '</div></div>'

    return html


def render_breakdown_card(breakdown, labels, variant="baseline", locale="es-ES", currency="EUR"):
    """
    Card listing the three components, total, effective rate and net income.

    labels: dict with 'title', 'subtitle', 'income_tax', 'social_security', 'vat'
    variant: 'baseline' (red accents) or 'alternative' (green accents)
    """
    def money(value):
        return format_currency(value, currency=currency, locale=locale)

    rows = [
        (labels["income_tax"], money(breakdown.income_tax)),
        (labels["social_security"], money(breakdown.social_security)),
        (labels["vat"], money(breakdown.vat)),
    ]

    html = f'<div class="tax-card tax-card-{variant}">'
    html += f'<div class="tax-card-title">{labels["title"]}</div>'
    html += f'<div class="tax-card-subtitle">{labels["subtitle"]}</div>'
    for label, value in rows:
        html += f'<div class="tax-row"><span>{label}</span><span class="tax-value">{value}</span></div>'
    html += '<div class="tax-row tax-total">'
    html += f'<span>Total taxes</span><span class="tax-value">{money(breakdown.total_tax)}</span></div>'
    html += '<div class="tax-row">'
    html += f'<span>Effective rate</span><span class="tax-value">{format_percentage(breakdown.effective_rate)}</span></div>'
    html += '<div class="tax-net">'
    html += f'<span>Net income</span><span class="tax-net-value">{money(breakdown.net_income)}</span></div>'
    html += '</div>'
    return html


def render_savings_banner(comparison, locale="es-ES", currency="EUR"):
    """Headline savings figure; the percentage is shown as a whole number."""
    savings = format_currency(comparison.savings, currency=currency, locale=locale)
    percentage = format_percentage(comparison.savings_percentage, decimals=0)
    return (
        '<div class="savings-banner">'
        '<div class="savings-label">Your potential yearly savings</div>'
        f'<div class="savings-value">{savings}</div>'
        f'<div class="savings-caption">{percentage} of your gross income</div>'
        '</div>'
    )
