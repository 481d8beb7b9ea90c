CURRENCY = "¥"


def fmt_number(amount: int) -> str:
    """
    Разделители тысяч:
    1200 → 1,200
    250000 → 250,000
    -5000 → -5,000
    """
    return f"{int(amount):,}"


def fmt_amount(amount: int) -> str:
    return f"{CURRENCY}{fmt_number(amount)}"


def fmt_percent(value: float) -> str:
    return f"{value:.1f}%"
