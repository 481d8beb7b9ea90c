from urllib.parse import quote

CHART_PATH = "/api/chart"
BALANCE_CHART_PATH = "/api/balance-chart"


def _encode(value) -> str:
    return quote(str(value), safe="")


def build_chart_url(category_data, title: str, base_url: str) -> str:
    """
    Ссылка на круговую диаграмму расходов.
    category_data: [(категория, сумма), ...] — порядок labels и values совпадает.
    """
    labels = ",".join(category for category, _ in category_data)
    values = ",".join(str(total) for _, total in category_data)

    return (
        f"{base_url.rstrip('/')}{CHART_PATH}"
        f"?labels={_encode(labels)}&values={_encode(values)}&title={_encode(title)}"
    )


def build_balance_chart_url(monthly_balances, base_url: str) -> str:
    """Ссылка на график остатка по месяцам: [(YYYY-MM, остаток), ...]."""
    months = ",".join(month for month, _ in monthly_balances)
    balances = ",".join(str(balance) for _, balance in monthly_balances)

    return (
        f"{base_url.rstrip('/')}{BALANCE_CHART_PATH}"
        f"?months={_encode(months)}&balances={_encode(balances)}"
    )
