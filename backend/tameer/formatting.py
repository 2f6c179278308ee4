"""Formatting helpers for estimate output.

Matches how amounts are quoted on the estimator screens: whole rupees with
comma separators ('Rs. 1,250'), totals in millions ('Rs. 12.34M') and
percentages without decimals.
"""

from __future__ import annotations


def format_pkr(amount: float) -> str:
    """Format a rupee amount with comma separators and no paisa."""
    return f"Rs. {amount:,.0f}"


def format_pkr_millions(amount: float) -> str:
    """Format a rupee amount in millions with two decimals ('Rs. 12.34M')."""
    return f"Rs. {amount / 1_000_000:.2f}M"


def format_percent(percent: float) -> str:
    return f"{percent:.0f}%"


def format_quantity(value: float, unit: str) -> str:
    """Format a material quantity with its unit.

    Whole quantities get comma separators ('31,500 Nos'); fractional ones
    keep up to two decimals ('0.85 Tons').
    """
    if float(value).is_integer():
        return f"{value:,.0f} {unit}"
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"
