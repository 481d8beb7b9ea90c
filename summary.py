from typing import NamedTuple, Optional

from calculations import (
    aggregate_categories,
    calc_month_span,
    compute_totals,
    percentage,
)
from utils.format import fmt_amount, fmt_percent
from utils.helpers import tx_field

SEPARATOR = "━━━━━━━━━━━━━━━"
THIN_SEPARATOR = "───────────────"


class Report(NamedTuple):
    text: str
    category_data: Optional[list[tuple[str, int]]] = None


def _type_icon(tx_type: str) -> str:
    return "💰" if tx_type == "income" else "💸"


def build_monthly_summary(transactions, month: str) -> Report:
    if not transactions:
        return Report(f"📊 {month} の集計\n\nデータがありません。")

    totals = compute_totals(transactions)
    expenses = [tx for tx in transactions if tx_field(tx, "type") != "income"]
    categories = aggregate_categories(expenses)

    lines = [
        f"📊 {month} の集計",
        SEPARATOR,
        f"💰 総収入: {fmt_amount(totals['income'])}",
        f"💸 総支出: {fmt_amount(totals['expense'])}",
        SEPARATOR,
        f"📈 残高: {fmt_amount(totals['balance'])}",
    ]

    # при нулевых расходах проценты не считаем и разбивку не показываем
    if not totals["expense"]:
        return Report("\n".join(lines))

    lines += ["", "📂 カテゴリ別支出", THIN_SEPARATOR]
    for category, total in categories:
        share = percentage(total, totals["expense"])
        lines.append(f"  {category}: {fmt_amount(total)} ({fmt_percent(share)})")

    return Report("\n".join(lines), categories)


def build_fixed_list(fixed_expenses) -> str:
    """
    Список уже без дублей (последняя запись на каждое описание).
    Итог считается только по расходам.
    """
    if not fixed_expenses:
        return "📋 固定費一覧\n\n登録されている固定費はありません。"

    lines = ["📋 固定費一覧", SEPARATOR]
    total = 0
    for item in fixed_expenses:
        tx_type = tx_field(item, "type")
        lines.append(
            f"{_type_icon(tx_type)} {tx_field(item, 'description')}: "
            f"{fmt_amount(tx_field(item, 'amount'))} [{tx_field(item, 'category')}]"
        )
        if tx_type == "expense":
            total += tx_field(item, "amount")

    lines.append(SEPARATOR)
    lines.append(f"📌 固定支出合計: {fmt_amount(total)}/月")
    return "\n".join(lines)


def build_registration_message(tx) -> str:
    tx_type = tx_field(tx, "type")
    type_label = "収入" if tx_type == "income" else "支出"

    text = (
        "✅ 登録しました\n"
        f"{_type_icon(tx_type)} {tx_field(tx, 'description')}: {fmt_amount(tx_field(tx, 'amount'))}\n"
        f"📂 {type_label} / {tx_field(tx, 'category')}"
    )
    if tx_field(tx, "is_fixed"):
        text += " 📌固定"
    return text


def build_balance_summary(transactions) -> str:
    month_span = calc_month_span(transactions)
    totals = compute_totals(transactions)

    return "\n".join([
        f"💰通算残高（{month_span}ヶ月）",
        SEPARATOR,
        f"総収入：{fmt_amount(totals['income'])}",
        f"総支出：{fmt_amount(totals['expense'])}",
        SEPARATOR,
        f"貯蓄額：{fmt_amount(totals['balance'])}",
    ])


def build_expense_analysis(expenses) -> Report:
    if not expenses:
        return Report("📊支出分析（通算）\n\n支出データがありません。")

    month_span = calc_month_span(expenses)
    categories = aggregate_categories(expenses)

    lines = [f"📊支出分析（通算：{month_span}ヶ月）", SEPARATOR]
    for category, total in categories:
        lines.append(f"{category}：{fmt_amount(total)}")

    return Report("\n".join(lines), categories or None)
