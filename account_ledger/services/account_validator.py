"""Account validation shared by the movement and balance paths."""

from account_ledger.errors import AccountInactive, AccountNotFound
from account_ledger.models.account import Account
from account_ledger.services.ledger_store import LedgerStore


class AccountValidator:

    def __init__(self, store: LedgerStore):
        self.store = store

    def validate(self, account_id: str) -> Account:
        """Return the account if it exists and is active."""
        account = self.store.get_account(account_id)
        if account is None:
            raise AccountNotFound(account_id)
        if not account.active:
            raise AccountInactive(account_id)
        return account
