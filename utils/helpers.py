def tx_field(tx, name, default=None):
    """
    Достаёт поле транзакции.
    Записи приходят и как TransactionModel, и как обычный dict.
    """
    if isinstance(tx, dict):
        return tx.get(name, default)
    return getattr(tx, name, default)
