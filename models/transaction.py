from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

TxType = Literal["income", "expense"]


@dataclass(frozen=True)
class TransactionDraft:
    """Результат разбора сообщения до классификации и сохранения."""

    description: str
    amount: int
    category: Optional[str] = None
    is_fixed: bool = False


class TransactionModel(BaseModel):
    id: Optional[int] = None
    user_id: str
    month: str              # YYYY-MM (UTC+9)
    description: str
    amount: int
    type: TxType
    category: str
    is_fixed: bool = False
    created_at: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("amount must be positive")
        return v

    @field_validator("description", "category")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v
