import logging

from telegram import Update
from telegram.ext import ApplicationBuilder

from config import get_settings
from services.db import init_db
from start_handler import start_handler, help_handler
from handlers.month_handler import month_handler
from handlers.fixed_handler import fixed_handler
from handlers.balance_handler import balance_handler
from handlers.transaction_handler import transaction_handler

logger = logging.getLogger(__name__)


async def error_handler(update, context):
    logger.error("Error while handling update %s", update, exc_info=context.error)


def build_application(settings):
    # каждое сообщение обрабатывается независимо, поэтому параллельно
    app = ApplicationBuilder().token(settings.telegram_token).concurrent_updates(True).build()
    app.bot_data["chart_base_url"] = settings.chart_base_url

    app.add_handler(start_handler)
    app.add_handler(help_handler)
    app.add_handler(month_handler)
    app.add_handler(fixed_handler)
    app.add_handler(balance_handler)
    app.add_handler(transaction_handler)
    app.add_error_handler(error_handler)
    return app


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    logger.info("Starting bot...")
    init_db(settings.db_url)
    app = build_application(settings)

    if settings.webhook_url:
        # Telegram присылает WEBHOOK_SECRET в X-Telegram-Bot-Api-Secret-Token,
        # запросы без него библиотека отклоняет
        logger.info("Bot running (webhook on port %s)...", settings.port)
        app.run_webhook(
            listen="0.0.0.0",
            port=settings.port,
            url_path="webhook",
            webhook_url=settings.webhook_url,
            secret_token=settings.webhook_secret,
            allowed_updates=[Update.MESSAGE],
        )
    else:
        logger.info("Bot running (polling)...")
        app.run_polling(allowed_updates=[Update.MESSAGE])


if __name__ == "__main__":
    main()
