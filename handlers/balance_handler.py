# handlers/balance_handler.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from telegram.ext import CommandHandler

from calculations import compute_monthly_balances
from chart_service import build_balance_chart_url, build_chart_url
from language import TEXTS
from services.transactions import get_all_expenses, get_all_transactions
from summary import build_balance_summary, build_expense_analysis

logger = logging.getLogger(__name__)


async def balance_report(update, context):
    """Остаток за всё время + разбивка расходов по категориям."""
    user_id = str(update.effective_user.id)

    try:
        txs = get_all_transactions(user_id)
        expenses = get_all_expenses(user_id)
    except SQLAlchemyError:
        logger.exception("Failed to load history for user=%s", user_id)
        await update.effective_message.reply_text(TEXTS["fetch_failed"])
        return

    analysis = build_expense_analysis(expenses)
    parts = [build_balance_summary(txs), analysis.text]

    base_url = context.bot_data.get("chart_base_url")
    if base_url:
        links = []
        if analysis.category_data:
            url = build_chart_url(analysis.category_data, TEXTS["analysis_chart_title"], base_url)
            links.append(TEXTS["chart_link"].format(url=url))

        balances = compute_monthly_balances(txs)
        if balances:
            links.append(TEXTS["balance_chart_link"].format(url=build_balance_chart_url(balances, base_url)))

        if links:
            parts.append("\n".join(links))

    await update.effective_message.reply_text("\n\n".join(parts))


balance_handler = CommandHandler("balance", balance_report)
