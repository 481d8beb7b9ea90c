import logging

from sqlalchemy.exc import SQLAlchemyError
from telegram import Update
from telegram.ext import CommandHandler, ContextTypes

from chart_service import build_chart_url
from language import TEXTS
from parser import current_month
from services.transactions import get_monthly_transactions
from summary import build_monthly_summary

logger = logging.getLogger(__name__)


async def month_report(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user_id = str(update.effective_user.id)
    month = current_month()

    try:
        txs = get_monthly_transactions(user_id, month)
    except SQLAlchemyError:
        logger.exception("Failed to load monthly transactions for user=%s", user_id)
        await update.effective_message.reply_text(TEXTS["fetch_failed"])
        return

    report = build_monthly_summary(txs, month)
    text = report.text

    base_url = context.bot_data.get("chart_base_url")
    if base_url and report.category_data:
        title = TEXTS["monthly_chart_title"].format(month=month)
        url = build_chart_url(report.category_data, title, base_url)
        text += "\n\n" + TEXTS["chart_link"].format(url=url)

    await update.effective_message.reply_text(text)


# Handler
month_handler = CommandHandler("month", month_report)
