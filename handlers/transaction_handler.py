import logging

from sqlalchemy.exc import SQLAlchemyError
from telegram.ext import MessageHandler, filters

from handlers.balance_handler import balance_report
from handlers.fixed_handler import fixed_report
from handlers.month_handler import month_report
from language import TEXTS
from parser import Command, parse_command, parse_transaction
from services.save_transaction import save_transaction
from summary import build_registration_message

logger = logging.getLogger(__name__)

COMMAND_HANDLERS = {
    Command.MONTHLY_SUMMARY: month_report,
    Command.FIXED_LIST: fixed_report,
    Command.BALANCE: balance_report,
}


async def handle_text(update, context):
    text = update.effective_message.text

    # 1. команда
    command = parse_command(text)
    if command is not None:
        logger.info("Command %s from user=%s", command.value, update.effective_user.id)
        await COMMAND_HANDLERS[command](update, context)
        return

    # 2. транзакция
    draft = parse_transaction(text)
    if draft is None:
        await update.effective_message.reply_text(TEXTS["usage"])
        return

    user_id = str(update.effective_user.id)
    try:
        tx = save_transaction(user_id, draft)
    except SQLAlchemyError:
        logger.exception("Failed to save transaction for user=%s", user_id)
        await update.effective_message.reply_text(TEXTS["insert_failed"])
        return

    await update.effective_message.reply_text(build_registration_message(tx))


transaction_handler = MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text)
