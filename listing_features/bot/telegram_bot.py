import asyncio
import json
import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from listing_features.models import FeatureCollection
from listing_features.suppliers.base import Supplier
from listing_features.suppliers.types import TYPES

log = logging.getLogger(__name__)


def format_caption(city: str, category: str, collection: FeatureCollection) -> str:
    count = len(collection.features)
    noun = "listing" if count == 1 else "listings"
    lines = [f"<b>{count} {noun}</b> — {city} {category}"]
    if collection.ttl is not None:
        lines.append(f"🕒 Cache for {collection.ttl}s")
    if collection.metadata is not None:
        lines.append(f"🔑 Id field: {collection.metadata.id_field}")
    return "\n".join(lines)


# Handlers
async def start(update: Update, _: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Hi! I turn Craigslist map searches into GeoJSON.\n\n"
        "/listings <city> <category> — e.g. /listings sfbay apartments\n"
        "/categories — known categories"
    )


async def categories(update: Update, _: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text("\n".join(sorted(TYPES)))


def make_listings_handler(supplier: Supplier):
    async def listings(update: Update, context: ContextTypes.DEFAULT_TYPE):
        if len(context.args) != 2:
            await update.message.reply_text("Usage: /listings <city> <category>")
            return

        city, category = (arg.lower() for arg in context.args)
        # fetch is blocking (requests), keep it off the event loop
        result = await asyncio.to_thread(supplier.get_data, city, category)
        if not result.ok:
            await update.message.reply_text(f"Couldn't load {city} {category}: {result.error}")
            return

        payload = json.dumps(result.collection.as_dict(), allow_nan=False).encode("utf-8")
        await update.message.reply_document(
            document=payload,
            filename=f"{city}-{category}.geojson",
            caption=format_caption(city, category, result.collection),
            parse_mode="HTML",
        )
        log.info("Sent %s/%s to chat %s", city, category, update.effective_chat.id)

    return listings


def attach_handlers(app: Application, supplier: Supplier):
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("categories", categories))
    app.add_handler(CommandHandler("listings", make_listings_handler(supplier)))
