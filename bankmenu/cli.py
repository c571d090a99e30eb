# -*- coding: utf-8 -*-
"""
Interactive Banking Menu

Purpose:
- Demonstrates polymorphism: both menus work with any `Account`.
- Main Menu picks the Savings or Current account; the Account Menu then
  deposits, withdraws or shows the balance of that account.

Behaviour:
- Every bad input is reported and re-prompted; account state never changes
  on a rejected choice.
- Ctrl+C or end of input exits cleanly.
"""

from __future__ import annotations

import bankmenu.config as cfg
from .accounts import Account, CurrentAccount, SavingsAccount, open_default_accounts
from .errors import InvalidMenuSelection, InvalidNumericInput
from .logging import get_logger, setup_logging
from .money import fmt_money
from .prompts import banner, clear_screen, get_valid_amount, pause, read_option

logger = get_logger(__name__)

DEPOSIT, WITHDRAW, CHECK_BALANCE, BACK = 1, 2, 3, 4
SELECT_SAVINGS, SELECT_CURRENT, EXIT = 1, 2, 3


def _report_bad_choice(exc: Exception) -> None:
    if isinstance(exc, InvalidNumericInput):
        clear_screen()
        print("Invalid input. Please enter a valid option.")
    else:
        print("Invalid option. Please try again.")
    logger.debug("Menu input rejected: %s", exc)
    pause()


def account_menu(account: Account) -> None:
    """Run the deposit/withdraw/balance loop for `account` until Back is chosen."""
    while True:
        clear_screen()
        banner(f"{account.get_name()} Menu")
        print("[1] Deposit")
        print("[2] Withdraw")
        print("[3] Check Balance")
        print("[4] Back")
        try:
            choice = read_option((DEPOSIT, WITHDRAW, CHECK_BALANCE, BACK))
        except (InvalidNumericInput, InvalidMenuSelection) as exc:
            _report_bad_choice(exc)
            continue

        clear_screen()
        if choice == DEPOSIT:
            banner("Enter amount to deposit")
            account.deposit(get_valid_amount())
        elif choice == WITHDRAW:
            banner("Enter amount to withdraw")
            account.withdraw(get_valid_amount())
        elif choice == CHECK_BALANCE:
            banner("Current Balance")
            print(f"Balance: {fmt_money(account.check_balance())}")
        else:
            print("Returning to Main Menu...")
            pause()
            return
        pause()


def main_menu(savings: SavingsAccount, current: CurrentAccount) -> None:
    """Loop over account selection until Exit is chosen."""
    accounts = {SELECT_SAVINGS: savings, SELECT_CURRENT: current}
    while True:
        clear_screen()
        banner("Main Menu")
        print("[1] Savings Account")
        print("[2] Current Account")
        print("[3] Exit\n")
        try:
            choice = read_option((SELECT_SAVINGS, SELECT_CURRENT, EXIT))
        except (InvalidNumericInput, InvalidMenuSelection) as exc:
            _report_bad_choice(exc)
            continue

        if choice == EXIT:
            print("Exiting the system. Goodbye!")
            return
        account = accounts[choice]
        logger.info("Selected %s", account.get_name())
        account_menu(account)


def main() -> None:
    setup_logging(cfg.LOG_LEVEL)
    savings, current = open_default_accounts()
    logger.info("Opened %r and %r", savings, current)
    try:
        main_menu(savings, current)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
