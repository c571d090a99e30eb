# -*- coding: utf-8 -*-
"""
Console helpers shared by the menus: headings, screen clearing, pauses and
validated reads of menu options and amounts.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable
import os
import sys

import bankmenu.config as cfg
from .errors import InvalidAmount, InvalidMenuSelection, InvalidNumericInput
from .logging import get_logger
from .money import parse_amount

logger = get_logger(__name__)

AMOUNT_PROMPT = "Amount: "
AMOUNT_RETRY_PROMPT = "Invalid input. Please enter a valid amount: "
OPTION_PROMPT = "Select an option: "


def clear_screen() -> None:
    if not cfg.CLEAR_SCREEN or not sys.stdout.isatty():
        return
    os.system("cls" if os.name == "nt" else "clear")


def pause() -> None:
    """Pause for user input (safe in case of non-interactive piping)."""
    try:
        input("\nPress Enter to continue...")
    except (EOFError, KeyboardInterrupt):
        print("")


def banner(title: str) -> None:
    width = len(title) + 10
    print("┌" + "─" * width + "┐")
    print("│" + title.center(width) + "│")
    print("└" + "─" * width + "┘\n")


def read_option(valid: Iterable[int]) -> int:
    """
    Read one menu choice.

    Raises InvalidNumericInput if the text is not an integer and
    InvalidMenuSelection if it is not one of `valid`.
    """
    text = input(OPTION_PROMPT).strip()
    try:
        choice = int(text)
    except ValueError:
        raise InvalidNumericInput(text) from None
    if choice not in valid:
        raise InvalidMenuSelection(choice)
    return choice


def get_valid_amount() -> Decimal:
    """Prompt until a non-negative number is entered and return it as money."""
    prompt = AMOUNT_PROMPT
    while True:
        text = input(prompt)
        try:
            return parse_amount(text)
        except (InvalidNumericInput, InvalidAmount) as exc:
            logger.debug("Rejected amount input: %s", exc)
            prompt = AMOUNT_RETRY_PROMPT
