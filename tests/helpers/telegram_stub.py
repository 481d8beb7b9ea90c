"""Minimal stand-ins for python-telegram-bot ``Update``/``Context`` objects.

Handlers only read ``effective_user.id``, ``effective_message.text`` and
``context.bot_data`` and only await ``effective_message.reply_text``.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock


def make_update(text: str, user_id: int = 42):
    message = SimpleNamespace(text=text, reply_text=AsyncMock())
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=user_id),
        effective_message=message,
        message=message,
    )


def make_context(chart_base_url: str | None = None):
    return SimpleNamespace(bot_data={"chart_base_url": chart_base_url})


def replies(update) -> list[str]:
    """Texts passed to ``reply_text`` in call order."""
    return [c.args[0] for c in update.effective_message.reply_text.await_args_list]
