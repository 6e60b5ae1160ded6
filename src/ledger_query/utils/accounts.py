"""Account name helpers. Account names are colon-separated paths."""

import re

ACCOUNT_SEPARATOR = ":"


def account_name_level(account: str) -> int:
    """Number of path segments in an account name, 0 for the empty name."""
    if not account:
        return 0
    return account.count(ACCOUNT_SEPARATOR) + 1


def account_name_to_account_regex(account: str) -> str:
    """Regex matching this account and its subaccounts."""
    return f"^{re.escape(account)}(:|$)"


def account_name_to_account_only_regex(account: str) -> str:
    """Regex matching exactly this account."""
    return f"^{re.escape(account)}$"
