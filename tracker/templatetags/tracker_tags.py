from django import template

register = template.Library()


@register.filter
def money(value, symbol="$"):
    """
    Two-decimal currency text. Negative amounts keep the sign before the symbol.
    Usage: {{ totals.final_total|money:branding.currency_symbol }}
    """
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return ""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


@register.filter
def hours(value):
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return ""


@register.filter
def mul(value, arg):
    try:
        return float(value) * float(arg)
    except (TypeError, ValueError):
        return ""


@register.filter
def get_item(dictionary, key):
    return dictionary.get(key)
