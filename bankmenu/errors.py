# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Banking Menu.

Every error here is recovered locally: menus and accounts catch them, print a
message and re-prompt. None is meant to reach the top of the program.
"""


class BankMenuError(Exception):
    """Base class for all banking menu errors."""


class InvalidMenuSelection(BankMenuError):
    """Raised when a numeric menu choice is not one of the listed options."""

    def __init__(self, choice: int):
        super().__init__(f"Invalid option: {choice}")
        self.choice = choice


class InvalidNumericInput(BankMenuError):
    """Raised when user input cannot be parsed as the expected number."""

    def __init__(self, text: str):
        super().__init__(f"Not a number: {text!r}")
        self.text = text


class InvalidAmount(BankMenuError):
    """
    Raised when an amount is unusable:
    - Negative when typed at the amount prompt.
    - Zero or negative when passed to deposit/withdraw.
    """
    pass


class InsufficientFunds(BankMenuError):
    """
    Raised when a withdrawal would take the balance below the account's
    floor (the savings minimum, or zero for a current account).
    """
    pass
