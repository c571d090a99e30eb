# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Bank Accounts - Savings and Current

- Both variants satisfy the `Account` protocol; menus depend only on it.
- Balance changes only through deposit/withdraw; amounts are validated
  centrally via money.py utilities.
- Failures never escape: the account prints why, logs it and returns False.
"""

from decimal import Decimal
from enum import Enum
from typing import Protocol, runtime_checkable

import bankmenu.config as cfg
from .errors import InsufficientFunds, InvalidAmount
from .logging import get_logger
from .money import ZERO, as_money, fmt_money, require_positive

logger = get_logger(__name__)


class AccountKind(Enum):
    SAVINGS = "Savings Account"
    CURRENT = "Current Account"


@runtime_checkable
class Account(Protocol):
    kind: AccountKind

    def get_name(self) -> str: ...

    def deposit(self, amount) -> bool: ...

    def withdraw(self, amount) -> bool: ...

    def check_balance(self) -> Decimal: ...


class _BalanceAccount:
    """
    Balance keeping shared by both variants. `_balance` is written only by
    `deposit` and `_withdraw_above`; subclasses decide the withdrawal floor.
    """

    kind: AccountKind

    def __init__(self, balance):
        self._balance = as_money(balance)

    def get_name(self) -> str:
        return self.kind.value

    def check_balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount) -> bool:
        try:
            amt = require_positive(amount)
        except InvalidAmount as exc:
            logger.info("%s: deposit rejected (%s)", self.get_name(), exc)
            print("Invalid deposit amount. Please enter a positive value.")
            return False
        self._balance = as_money(self._balance + amt)
        logger.info("%s: deposited %s, balance %s", self.get_name(), amt, self._balance)
        print(f"Deposited: {fmt_money(amt)}. New balance: {fmt_money(self._balance)}")
        return True

    def _withdraw_above(self, amount, floor: Decimal, shortfall_message: str) -> bool:
        try:
            amt = require_positive(amount)
            if self._balance - amt < floor:
                raise InsufficientFunds(
                    f"balance {self._balance} - {amt} would fall below {floor}"
                )
        except InvalidAmount as exc:
            logger.info("%s: withdrawal rejected (%s)", self.get_name(), exc)
            print("Invalid withdrawal amount.")
            return False
        except InsufficientFunds as exc:
            logger.info("%s: withdrawal rejected (%s)", self.get_name(), exc)
            print(shortfall_message)
            return False
        self._balance = as_money(self._balance - amt)
        logger.info("%s: withdrew %s, balance %s", self.get_name(), amt, self._balance)
        print(f"Withdrawn: {fmt_money(amt)}. New balance: {fmt_money(self._balance)}")
        return True


class SavingsAccount(_BalanceAccount):
    """Account that must keep at least `min_balance` after any withdrawal."""

    kind = AccountKind.SAVINGS

    def __init__(self, balance, min_balance=cfg.SAVINGS_MIN_BALANCE):
        super().__init__(balance)
        self.min_balance = as_money(min_balance)

    def __repr__(self) -> str:
        return f"SavingsAccount(balance={self._balance}, min_balance={self.min_balance})"

    def withdraw(self, amount) -> bool:
        return self._withdraw_above(
            amount, self.min_balance,
            f"Insufficient balance. Minimum balance of {fmt_money(self.min_balance)} must be maintained.",
        )


class CurrentAccount(_BalanceAccount):
    """Account that may be drawn down to exactly zero, never below."""

    kind = AccountKind.CURRENT

    def __repr__(self) -> str:
        return f"CurrentAccount(balance={self._balance})"

    def withdraw(self, amount) -> bool:
        return self._withdraw_above(
            amount, ZERO,
            "Insufficient balance to complete the withdrawal.",
        )


def open_default_accounts() -> tuple[SavingsAccount, CurrentAccount]:
    """The two accounts the program starts with, from configuration."""
    return (
        SavingsAccount(cfg.SAVINGS_OPENING_BALANCE),
        CurrentAccount(cfg.CURRENT_OPENING_BALANCE),
    )
