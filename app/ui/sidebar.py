# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the LLC Tax Comparator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

import streamlit as st
from lib.config import ComparatorSettings
from lib.formatting import format_currency
from lib.utils.logging_config import setup_logger

logger = setup_logger(__name__)


def _select_preset(value):
    st.session_state.income = int(value)


def render_income_controls(settings: ComparatorSettings) -> int:
    """
    Renders the income selector: preset buttons plus a slider.
    Returns: selected gross annual income (int)
    """
    if 'income' not in st.session_state:
        st.session_state.income = int(settings.default_income)

    with st.sidebar:
        st.markdown("### ANNUAL INCOME")

        cols = st.columns(2)
        for i, preset in enumerate(settings.income_presets):
            cols[i % 2].button(
                format_currency(preset, currency=settings.currency, locale=settings.locale),
                key=f"preset_{preset}",
                on_click=_select_preset,
                args=(preset,),
                type="primary" if st.session_state.income == int(preset) else "secondary",
                use_container_width=True,
            )

        income = st.slider(
            "Gross annual income",
            min_value=int(settings.slider_min),
            max_value=int(settings.slider_max),
            step=int(settings.slider_step),
            key="income",
            help="Revenue invoiced per year before any taxes",
        )

        st.caption(
            f"{format_currency(settings.slider_min, settings.currency, settings.locale)} – "
            f"{format_currency(settings.slider_max, settings.currency, settings.locale)}"
        )

    logger.debug(f"Income selected: {income}")
    return income
