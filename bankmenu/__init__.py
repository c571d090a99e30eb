# -*- coding: utf-8 -*-
"""
Package for the interactive banking menu: accounts, money handling and the
console menus that drive them.

The global `Decimal` context is fixed here so every balance and amount in the
program is computed with the same precision and rounding.
"""
from decimal import getcontext, ROUND_HALF_EVEN

# Banker's rounding for all monetary arithmetic.
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN
