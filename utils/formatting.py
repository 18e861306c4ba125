"""
Number formatting for the KPI cards.
"""


def format_card_value(value, heading):
    """Main card value: currency for revenue, percent for growth, plain number otherwise."""
    if value is None:
        return '0'
    if heading == 'Total Revenue':
        return f"${value:,.2f}"
    if heading == 'Growth Rate':
        return f"{value:,.1f}%"
    text = f"{value:,.2f}".rstrip('0').rstrip('.')
    return text


def format_change_percent(value):
    if value is None:
        return '0.0%'
    sign = '+' if value > 0 else ''
    return f"{sign}{value:,.1f}%"


def trend_label(change_percent):
    if change_percent is None or change_percent == 0:
        return 'No change from last period'
    if change_percent > 0:
        return 'Trending up this period'
    return 'Trending down this period'
