"""Example wallet signer adapter.

Use this module as a reference when implementing new signer adapters.
Implement BaseWalletSigner and register the adapter in SignerFactory.
"""

import hashlib

from certifier.ledger.signer_base import BaseWalletSigner, ErrorCallback, SuccessCallback
from certifier.ledger.transaction import StampTransaction


class ExampleSignerAdapter(BaseWalletSigner):
    """Signer with a fixed account that reports success synchronously.

    No network calls. The digest is derived from the transaction content so
    repeated submissions of the same call are recognisable in logs.
    """

    DEFAULT_ACCOUNT = "0x" + "0" * 63 + "1"

    def __init__(self, account: str | None = DEFAULT_ACCOUNT) -> None:
        self._account = account

    def active_account(self) -> str | None:
        return self._account

    def sign_and_execute(
        self,
        transaction: StampTransaction,
        *,
        chain: str,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        _ = on_error
        material = b"|".join((chain.encode(), transaction.target.encode(), *transaction.arguments))
        on_success("0x" + hashlib.sha256(material).hexdigest())
