# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the LLC Tax Comparator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&family=JetBrains+Mono:wght@400;500;700&display=swap');

    .block-container {
        padding-top: 3rem !important;
        padding-bottom: 3rem !important;
    }

    /* ========================================== */
    /* DESIGN TOKENS                              */
    /* ========================================== */

    :root {
        --card-bg: rgba(28, 34, 45, 0.45);
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #10b981;
        --accent-danger: #ef4444;

        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;

        --font-size-sm: 0.75rem;
        --font-size-base: 0.85rem;
        --font-size-lg: 1.1rem;
        --font-size-xl: 1.25rem;
        --font-size-3xl: 2.2rem;

        --radius: 10px;
    }

    /* ========================================== */
    /* KPI STRIP                                  */
    /* ========================================== */

    .kpi-board {
        border: 1px solid rgba(60, 66, 75, 1) !important;
        border-radius: var(--radius);
        padding: 1rem;
        box-shadow: 0 4px 24px rgba(0, 0, 0, 0.2);
        margin: 1rem 0 2rem 0;
    }

    .kpi-header {
        font-family: var(--font-mono);
        font-size: var(--font-size-lg);
        font-weight: 600;
        color: var(--text-primary);
        margin-bottom: 1rem;
    }

    .kpi-grid {
        display: grid;
        grid-template-columns: repeat(4, 1fr);
        gap: 0.5rem;
    }

    .kpi-item {
        border-left: 1px solid rgba(90, 122, 143, 0.35);
        padding: 0.25rem 0.85rem 0.25rem 1.25rem;
        min-height: 50px;
    }

    .kpi-label {
        font-family: var(--font-primary);
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
        text-transform: uppercase;
        letter-spacing: 0.05em;
    }

    .kpi-value-row {
        display: flex;
        align-items: center;
        gap: 12px;
    }

    .kpi-value {
        font-family: var(--font-mono);
        font-size: var(--font-size-xl);
        font-weight: 700;
        color: #ffffff;
        font-variant-numeric: tabular-nums;
    }

    .metric-delta {
        font-family: var(--font-mono);
        font-size: var(--font-size-base);
        padding: 2px 8px;
        border-radius: var(--radius);
    }

    .delta-pos { color: #10b981; background-color: rgba(16, 185, 129, 0.1); }
    .delta-neg { color: #ef4444; background-color: rgba(239, 68, 68, 0.1); }
    .delta-neu { color: #9CA3AF; background-color: rgba(156, 163, 175, 0.1); }

    /* ========================================== */
    /* BREAKDOWN CARDS                            */
    /* ========================================== */

    .tax-card {
        background-color: var(--card-bg);
        border: 1px solid var(--card-border);
        border-radius: var(--radius);
        padding: 1.5rem;
    }

    .tax-card-baseline { border-top: 3px solid var(--accent-danger); }
    .tax-card-alternative { border-top: 3px solid var(--accent-primary); }

    .tax-card-title {
        font-family: var(--font-primary);
        font-weight: 800;
        font-size: var(--font-size-lg);
        color: var(--text-primary);
    }

    .tax-card-subtitle {
        font-size: var(--font-size-sm);
        color: var(--text-secondary);
        margin-bottom: 1rem;
    }

    .tax-row {
        display: flex;
        justify-content: space-between;
        padding: 0.35rem 0;
        font-size: var(--font-size-base);
        color: var(--text-secondary);
    }

    .tax-total {
        border-top: 1px solid var(--card-border);
        margin-top: 0.5rem;
        padding-top: 0.75rem;
        font-weight: 800;
        color: var(--text-primary);
    }

    .tax-value { font-family: var(--font-mono); font-weight: 700; }
    .tax-card-baseline .tax-value { color: var(--accent-danger); }
    .tax-card-alternative .tax-value { color: var(--accent-primary); }

    .tax-net {
        display: flex;
        justify-content: space-between;
        margin-top: 1rem;
        padding: 0.85rem 1rem;
        border-radius: var(--radius);
        background-color: rgba(90, 122, 143, 0.12);
        font-weight: 800;
        color: var(--text-primary);
    }

    .tax-net-value { font-family: var(--font-mono); font-size: var(--font-size-xl); }

    /* ========================================== */
    /* SAVINGS BANNER                             */
    /* ========================================== */

    .savings-banner {
        text-align: center;
        margin: 1.5rem 0;
        padding: 1.5rem;
        border-radius: var(--radius);
        background-color: rgba(16, 185, 129, 0.08);
        border: 1px solid rgba(16, 185, 129, 0.3);
    }

    .savings-label, .savings-caption {
        font-size: var(--font-size-base);
        color: var(--text-secondary);
    }

    .savings-value {
        font-family: var(--font-mono);
        font-size: var(--font-size-3xl);
        font-weight: 800;
        color: var(--accent-primary);
    }

    @media (max-width: 768px) {
        .kpi-grid { grid-template-columns: repeat(2, 1fr); }
    }
</style>
"""
