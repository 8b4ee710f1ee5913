from abc import ABC, abstractmethod
from collections.abc import Callable

from certifier.ledger.transaction import StampTransaction

SuccessCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]


class BaseWalletSigner(ABC):
    """Contract for wallet-signing collaborators."""

    @abstractmethod
    def active_account(self) -> str | None:
        """Return the address of the active signing identity, or None."""

    @abstractmethod
    def sign_and_execute(
        self,
        transaction: StampTransaction,
        *,
        chain: str,
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> None:
        """Sign and submit ``transaction`` on ``chain``.

        Exactly one of the callbacks is invoked once the transaction reaches
        finality or fails, with the transaction digest or an error message.
        The callback may run before this method returns or at any later time.

        Raises:
            SignerError: if the submission could not be started.
        """
