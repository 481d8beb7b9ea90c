import logging

from sqlalchemy.exc import SQLAlchemyError
from telegram.ext import CommandHandler

from language import TEXTS
from services.transactions import get_fixed_expenses
from summary import build_fixed_list

logger = logging.getLogger(__name__)


async def fixed_report(update, context):
    user_id = str(update.effective_user.id)

    try:
        items = get_fixed_expenses(user_id)
    except SQLAlchemyError:
        logger.exception("Failed to load fixed expenses for user=%s", user_id)
        await update.effective_message.reply_text(TEXTS["fetch_failed"])
        return

    await update.effective_message.reply_text(build_fixed_list(items))


fixed_handler = CommandHandler("fixed", fixed_report)
