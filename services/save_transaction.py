# services/save_transaction.py
from datetime import datetime, timezone
from typing import Optional

from models.transaction import TransactionDraft, TransactionModel
from parser import get_current_month
from services.transactions import insert_transaction
from utils.classify import classify_category, classify_type


def build_transaction(user_id: str, draft: TransactionDraft, now: datetime) -> TransactionModel:
    """
    Доход/расход определяется по описанию.
    Категория от пользователя важнее автоматической.
    Месяц фиксируется один раз, в момент создания.
    """
    tx_type = classify_type(draft.description)
    category = draft.category or classify_category(draft.description, tx_type)

    return TransactionModel(
        user_id=user_id,
        month=get_current_month(now),
        description=draft.description,
        amount=draft.amount,
        type=tx_type,
        category=category,
        is_fixed=draft.is_fixed,
    )


def save_transaction(user_id: str, draft: TransactionDraft, now: Optional[datetime] = None) -> TransactionModel:
    """Классифицирует и сохраняет транзакцию. Возвращает сохранённую запись."""
    tx = build_transaction(user_id, draft, now or datetime.now(timezone.utc))
    return insert_transaction(tx)
