"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
# Display only; set CURRENCY to any key below. Unknown codes show "$".
CURRENCY = "GBP"
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}
SAVINGS_MIN_BALANCE = "1000.00"

# --- Accounts opened at start-up ---
SAVINGS_OPENING_BALANCE = "2000.00"
CURRENT_OPENING_BALANCE = "3000.00"

# --- Console ---
LOG_LEVEL: str = "WARNING"  # logs go to stderr; INFO shows every transaction
CLEAR_SCREEN: bool = True  # only honoured when stdout is a terminal
