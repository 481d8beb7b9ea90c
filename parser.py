import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from models.transaction import TransactionDraft


class Command(str, Enum):
    MONTHLY_SUMMARY = "monthly_summary"
    FIXED_LIST = "fixed_list"
    BALANCE = "balance"


COMMAND_TRIGGERS = (
    ("今月", Command.MONTHLY_SUMMARY),
    ("固定一覧", Command.FIXED_LIST),
    ("残高", Command.BALANCE),
)

FIXED_MARKER = "固定"

JST_OFFSET = timedelta(hours=9)

# ０-９ → 0-9
_FULLWIDTH_DIGITS = {code: code - 0xFEE0 for code in range(ord("０"), ord("９") + 1)}
_FULLWIDTH_SPACE = "　"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# верхняя граница INTEGER в БД
MAX_AMOUNT = 2**63 - 1


def parse_command(text: str) -> Optional[Command]:
    trimmed = text.strip()
    for trigger, command in COMMAND_TRIGGERS:
        if trimmed == trigger:
            return command
    return None


def normalize_text(text: str) -> str:
    text = text.translate(_FULLWIDTH_DIGITS)
    return text.replace(_FULLWIDTH_SPACE, " ")


def parse_amount(raw: str) -> Optional[int]:
    """
    "1,200" → 1200, "1200円" → 1200, "abc" → None.
    Ноль, отрицательные и слишком большие суммы не принимаются.
    """
    match = _LEADING_INT.match(raw.replace(",", ""))
    if not match:
        return None
    amount = int(match.group(1))
    if amount <= 0 or amount > MAX_AMOUNT:
        return None
    return amount


def parse_transaction(text: str) -> Optional[TransactionDraft]:
    """
    Форматы:
        {описание} {сумма}
        {описание} {сумма} {категория}
        {описание} {сумма} 固定
        {описание} {сумма} {категория} 固定
    """
    parts = normalize_text(text.strip()).split()
    if len(parts) < 2:
        return None

    description = parts[0]
    amount = parse_amount(parts[1])
    if amount is None:
        return None

    category = None
    is_fixed = False

    # лишние слова после категории игнорируются
    for token in parts[2:]:
        if token == FIXED_MARKER:
            is_fixed = True
        elif category is None:
            category = token

    return TransactionDraft(
        description=description,
        amount=amount,
        category=category,
        is_fixed=is_fixed,
    )


def get_current_month(reference_time: datetime) -> str:
    """Месяц YYYY-MM по японскому времени (UTC+9), независимо от TZ сервера."""
    if reference_time.tzinfo is None:
        reference_time = reference_time.replace(tzinfo=timezone.utc)
    jst = reference_time.astimezone(timezone.utc) + JST_OFFSET
    return f"{jst.year}-{jst.month:02d}"


def current_month() -> str:
    return get_current_month(datetime.now(timezone.utc))
