"""
Account state for the session.

Holds the fetched account list and the selected account, plus ``loading``
and ``error`` for the UI. Failures never propagate out of an action: they are
converted to a message and stored in ``error``.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from payout_portal.audit.logger import AuditTrail
from payout_portal.models.account import Account
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.providers.transport import TransportError

logger = logging.getLogger("payout_portal.accounts")


class AccountManager:
    def __init__(self, client: MuralPayClient, audit: Optional[AuditTrail] = None):
        self._client = client
        self._audit = audit or AuditTrail()
        self.accounts: list[Account] = []
        self.selected_account: Optional[Account] = None
        self.loading = False
        self.error: Optional[str] = None

    @property
    def selected_account_id(self) -> Optional[str]:
        return self.selected_account.id if self.selected_account else None

    async def list_accounts(self) -> list[Account]:
        """
        Fetch all accounts and replace the local list.

        Selects the first account when nothing is selected yet. Returns an
        empty list on failure.
        """
        self.loading = True
        self.error = None
        try:
            accounts = await self._client.get_accounts()
        except (TransportError, ValidationError) as e:
            self.error = str(e)
            logger.warning("Fetching accounts failed: %s", e)
            return []
        finally:
            self.loading = False

        self.accounts = accounts
        if accounts and self.selected_account is None:
            self.selected_account = accounts[0]
        elif self.selected_account is not None:
            # Keep the selection pointing at the freshest copy
            for account in accounts:
                if account.id == self.selected_account.id:
                    self.selected_account = account
                    break

        logger.info("Fetched %d accounts", len(accounts))
        return accounts

    async def create_account(self, name: str) -> Optional[Account]:
        """
        Create an account, select it and refresh the list.

        Returns None (with ``error`` set) for a blank name or a failed call.
        """
        self.error = None
        name = (name or "").strip()
        if not name:
            self.error = "Account name is required"
            return None

        try:
            account = await self._client.create_account(name)
        except (TransportError, ValidationError) as e:
            self.error = str(e)
            self._audit.log_event("account_creation_failed", details={"name": name, "error": str(e)})
            return None

        self.selected_account = account
        self._audit.log_event(
            "account_created",
            account_id=account.id,
            details={"name": account.name, "status": account.status},
        )
        await self.list_accounts()
        return account

    def select_account(self, account_id: str) -> None:
        """Select an account from the local list. Unknown ids are ignored."""
        for account in self.accounts:
            if account.id == account_id:
                self.selected_account = account
                self._audit.log_event("account_selected", account_id=account_id)
                return
        logger.debug("Ignoring selection of unknown account %s", account_id)
