from telegram.ext import CommandHandler

from language import TEXTS


async def start(update, context):
    await update.message.reply_text("こんにちは！家計簿ボットです 💰\n\n" + TEXTS["usage"])


async def help_command(update, context):
    await update.message.reply_text(TEXTS["usage"])


start_handler = CommandHandler("start", start)
help_handler = CommandHandler("help", help_command)
