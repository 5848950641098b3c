# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the LLC Tax Comparator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
LLC Tax Comparator - Streamlit Application

Funnel page comparing a Spanish freelancer's yearly tax burden with
running the same revenue through a US LLC:
- Income presets and slider
- Breakdown cards for both regimes
- Savings headline and charts
- LLC state pricing table
"""

import sys
from functools import partial
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st
from modules.tax.comparison import compare_incomes, savings_curve, income_range, breakdown_table
from modules.tax.calculators import get_calculator
from modules.pricing import state_comparison_table, get_additional_service_price_formatted
from lib.config import load_settings
from lib.formatting import format_currency, format_percentage
from lib.utils.logging_config import setup_logger
from app.charts.visualizations import create_component_chart, create_savings_curve_chart
from app.ui.styles import APP_STYLE
from app.ui.components import render_breakdown_card, render_savings_banner, render_kpi_dashboard
from app.ui.sidebar import render_income_controls

logger = setup_logger(__name__)

st.set_page_config(
    page_title="LLC Tax Comparator",
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown(APP_STYLE, unsafe_allow_html=True)

BASELINE_LABELS = {
    "title": "Freelancer in Spain",
    "subtitle": "Autónomo: IRPF + social security + IVA",
    "income_tax": "IRPF (income tax)",
    "social_security": "Social security",
    "vat": "IVA (21%)",
}

ALTERNATIVE_LABELS = {
    "title": "Your US LLC",
    "subtitle": "Pass-through entity, non-resident owner",
    "income_tax": "Federal tax",
    "social_security": "Self-employment tax",
    "vat": "VAT",
}


@st.cache_data(show_spinner=False)
def compare_cached(income: int, baseline_code: str, alternative_code: str):
    """Calculators are pure, so results are cached by input."""
    return compare_incomes(income, baseline_code, alternative_code)


@st.cache_data(show_spinner=False)
def savings_curve_cached(start: int, stop: int, step: int, baseline_code: str, alternative_code: str):
    return savings_curve(income_range(start, stop, step), baseline_code, alternative_code)


def main():
    try:
        settings = load_settings()
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        logger.error(f"Invalid comparator settings: {e}")
        st.error(f"Invalid configuration: {e}")
        st.stop()

    st.title("How much would you save with a US LLC?")
    st.caption("Compare what a Spanish freelancer pays with what stays in your pocket through an LLC.")

    income = render_income_controls(settings)

    try:
        comparison = compare_cached(income, settings.baseline_jurisdiction, settings.alternative_jurisdiction)
    except ValueError as e:
        logger.error(f"Comparison failed for income {income}: {e}")
        st.error(str(e))
        st.stop()

    money = partial(format_currency, currency=settings.currency, locale=settings.locale)

    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown(
            render_breakdown_card(comparison.baseline, BASELINE_LABELS, "baseline", settings.locale, settings.currency),
            unsafe_allow_html=True
        )
    with col_b:
        st.markdown(
            render_breakdown_card(comparison.alternative, ALTERNATIVE_LABELS, "alternative", settings.locale, settings.currency),
            unsafe_allow_html=True
        )

    st.markdown(render_savings_banner(comparison, settings.locale, settings.currency), unsafe_allow_html=True)

    st.markdown(render_kpi_dashboard([
        {"label": "Gross income", "value": money(comparison.gross_income)},
        {"label": "Taxes in Spain", "value": money(comparison.baseline.total_tax),
         "delta": format_percentage(comparison.baseline.effective_rate), "delta_color": "neg"},
        {"label": "Taxes with LLC", "value": money(comparison.alternative.total_tax)},
        {"label": "Extra net income", "value": money(comparison.savings),
         "delta": format_percentage(comparison.savings_percentage, decimals=0), "delta_color": "pos"},
    ], title="At a glance"), unsafe_allow_html=True)

    chart_left, chart_right = st.columns(2)
    with chart_left:
        st.plotly_chart(create_component_chart(comparison), use_container_width=True)
    with chart_right:
        curve = savings_curve_cached(
            int(settings.slider_min), int(settings.slider_max), int(settings.slider_step),
            settings.baseline_jurisdiction, settings.alternative_jurisdiction
        )
        st.plotly_chart(
            create_savings_curve_chart(
                curve,
                current_income=income,
                baseline_label=comparison.baseline.jurisdiction,
                alternative_label=comparison.alternative.jurisdiction,
            ),
            use_container_width=True
        )

    with st.expander("Show calculation details"):
        table = breakdown_table(comparison).map(money)
        table.loc["Effective rate (%)"] = [
            format_percentage(b.effective_rate)
            for b in (comparison.baseline, comparison.alternative)
        ]
        st.dataframe(table, use_container_width=True)

        for code in (settings.baseline_jurisdiction, settings.alternative_jurisdiction):
            calculator = get_calculator(code)
            st.markdown(f"**{calculator.get_jurisdiction_name()}**")
            for assumption in calculator.get_assumptions():
                st.markdown(f"- {assumption}")

        st.caption(
            "Simplified marketing estimate. US federal and state obligations, deductible "
            "expenses and personal allowances are not modelled. This is not tax advice."
        )

    st.markdown("---")
    st.markdown("### Where to form your LLC")
    st.dataframe(state_comparison_table(), hide_index=True, use_container_width=True)
    st.caption(
        f"Add-ons: 30-minute consultation {get_additional_service_price_formatted('consultation')}, "
        f"LLC dissolution {get_additional_service_price_formatted('dissolution')}"
    )


main()
