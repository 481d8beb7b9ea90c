import logging

from models.transaction import TransactionModel
from .db import session_scope, Transaction

logger = logging.getLogger(__name__)


def _to_model(row: Transaction) -> TransactionModel:
    return TransactionModel(
        id=row.id,
        user_id=row.user_id,
        month=row.month,
        description=row.description,
        amount=row.amount,
        type=row.type,
        category=row.category,
        is_fixed=row.is_fixed,
        created_at=row.created_at,
    )


def insert_transaction(tx: TransactionModel) -> TransactionModel:
    """
    Сохраняет транзакцию и возвращает её с id.
    Ошибки БД (SQLAlchemyError) пробрасываются наверх.
    """
    with session_scope() as session:
        row = Transaction(
            user_id=tx.user_id,
            month=tx.month,
            description=tx.description,
            amount=tx.amount,
            type=tx.type,
            category=tx.category,
            is_fixed=tx.is_fixed,
        )
        session.add(row)
        session.flush()
        saved = _to_model(row)

    logger.info("Saved transaction id=%s user=%s month=%s", saved.id, saved.user_id, saved.month)
    return saved


def get_monthly_transactions(user_id: str, month: str) -> list[TransactionModel]:
    with session_scope() as session:
        rows = (
            session.query(Transaction)
            .filter(Transaction.user_id == user_id, Transaction.month == month)
            .order_by(Transaction.created_at.asc(), Transaction.id.asc())
            .all()
        )
        return [_to_model(r) for r in rows]


def get_fixed_expenses(user_id: str) -> list[TransactionModel]:
    """Фиксированные (固定) записи пользователя; на каждое описание только самая свежая."""
    with session_scope() as session:
        rows = (
            session.query(Transaction)
            .filter(Transaction.user_id == user_id, Transaction.is_fixed.is_(True))
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .all()
        )
        items = [_to_model(r) for r in rows]

    seen = set()
    unique = []
    for item in items:
        if item.description in seen:
            continue
        seen.add(item.description)
        unique.append(item)
    return unique


def get_all_transactions(user_id: str) -> list[TransactionModel]:
    with session_scope() as session:
        rows = (
            session.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.asc(), Transaction.id.asc())
            .all()
        )
        return [_to_model(r) for r in rows]


def get_all_expenses(user_id: str) -> list[TransactionModel]:
    with session_scope() as session:
        rows = (
            session.query(Transaction)
            .filter(Transaction.user_id == user_id, Transaction.type == "expense")
            .order_by(Transaction.created_at.asc(), Transaction.id.asc())
            .all()
        )
        return [_to_model(r) for r in rows]
