from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CURRENCY = "KRW"


@dataclass(frozen=True)
class Money:
    amount_cents: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if len(self.currency) != 3 or not self.currency.isalpha() or not self.currency.isupper():
            raise ValueError("currency must be a 3-letter uppercase code")

    def times(self, quantity: int) -> Money:
        return Money(amount_cents=self.amount_cents * quantity, currency=self.currency)

    def plus(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValueError("cannot add money in different currencies")
        return Money(amount_cents=self.amount_cents + other.amount_cents, currency=self.currency)

    def is_negative(self) -> bool:
        return self.amount_cents < 0


def zero(currency: str = DEFAULT_CURRENCY) -> Money:
    return Money(amount_cents=0, currency=currency)
