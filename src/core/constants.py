"""
Constants.

Defaults for newly opened products and the status codes/messages
returned by the write endpoints.
"""

# Accounts
SAVINGS = "Savings"
BRANCH_ADDRESS = "123 Main Street, New York"
ACCOUNTS_AUDITOR = "ACCOUNTS_MS"

# Loans
HOME_LOAN = "Home Loan"
NEW_LOAN_LIMIT = 100_000
LOANS_AUDITOR = "LOANS_MS"

# Cards
CREDIT_CARD = "Credit Card"
NEW_CARD_LIMIT = 100_000
CARDS_AUDITOR = "CARDS_MS"

STATUS_201 = "201"
STATUS_200 = "200"
STATUS_417 = "417"
MESSAGE_200 = "Request processed successfully"
MESSAGE_417_UPDATE = "Update operation failed. Please try again or contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please try again or contact Dev team"
