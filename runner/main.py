import logging

from telegram.ext import Application

from config import (CRAIGSLIST_TTL, HTTP_TIMEOUT_SECONDS, ID_FIELD, LOG_LEVEL,
                    TELEGRAM_TOKEN)
from listing_features.bot.telegram_bot import attach_handlers
from listing_features.suppliers.craigslist import CraigslistSupplier

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


def main():
    # 1) Supplier with its configuration passed in explicitly
    supplier = CraigslistSupplier(
        ttl=CRAIGSLIST_TTL,
        id_field=ID_FIELD,
        timeout=HTTP_TIMEOUT_SECONDS,
    )

    # 2) Build bot
    application = Application.builder().token(TELEGRAM_TOKEN).build()

    # 3) Handlers
    attach_handlers(application, supplier)

    log.info("Bot running. Ctrl+C to stop.")
    application.run_polling(close_loop=False)


if __name__ == "__main__":
    main()
