from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from utils.classify import DEFAULT_CATEGORY
from utils.helpers import tx_field


def compute_totals(transactions: Iterable) -> dict:
    """
    Возвращает словарь:
    {
        "income": int,
        "expense": int,
        "balance": int    # может быть отрицательным
    }
    Всё, что не income, считается расходом.
    """
    income = 0
    expense = 0
    for tx in transactions:
        amount = tx_field(tx, "amount", 0) or 0
        if tx_field(tx, "type") == "income":
            income += amount
        else:
            expense += amount

    return {
        "income": income,
        "expense": expense,
        "balance": income - expense,
    }


def aggregate_categories(expenses: Iterable) -> list[tuple[str, int]]:
    """Суммы по категориям, по убыванию. При равенстве сохраняется порядок появления."""
    totals: dict[str, int] = {}
    for tx in expenses:
        category = tx_field(tx, "category") or DEFAULT_CATEGORY
        totals[category] = totals.get(category, 0) + (tx_field(tx, "amount", 0) or 0)

    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def calc_month_span(transactions: Iterable) -> int:
    months = {tx_field(tx, "month") for tx in transactions}
    months.discard(None)
    months.discard("")
    return len(months)


def compute_monthly_balances(transactions: Iterable) -> list[tuple[str, int]]:
    """Накопленный остаток на конец каждого месяца, по возрастанию месяца."""
    per_month: dict[str, int] = {}
    for tx in transactions:
        month = tx_field(tx, "month")
        if not month:
            continue
        amount = tx_field(tx, "amount", 0) or 0
        delta = amount if tx_field(tx, "type") == "income" else -amount
        per_month[month] = per_month.get(month, 0) + delta

    result = []
    running = 0
    for month in sorted(per_month):
        running += per_month[month]
        result.append((month, running))
    return result


def percentage(part: int, whole: int) -> Optional[float]:
    """Доля в процентах, один знак; .x5 округляется вверх (12.25 → 12.3)."""
    if not whole:
        return None
    share = Decimal(100 * part) / Decimal(whole)
    return float(share.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
