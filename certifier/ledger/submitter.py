from collections.abc import Callable

from certifier.ledger.exceptions import NotReadyError, SignerError, TransactionFailedError
from certifier.ledger.signer_base import BaseWalletSigner, ErrorCallback, SuccessCallback
from certifier.ledger.transaction import StampTransaction, build_stamp_transaction
from certifier.logging.logger import Log


class AttestationSubmitter:
    """Builds stamp transactions and hands them to the wallet signer.

    The submitter's contract ends once the signer has accepted the
    transaction; finality arrives later through one of the callbacks.
    """

    def __init__(
        self,
        *,
        signer: BaseWalletSigner,
        package_id: str,
        module: str,
        function: str,
        chain: str,
        gas_budget: int,
    ) -> None:
        self._signer = signer
        self._package_id = package_id
        self._module = module
        self._function = function
        self._chain = chain
        self._gas_budget = gas_budget

    def signing_identity(self) -> str | None:
        return self._signer.active_account()

    def submit(
        self,
        *,
        storage_id: str,
        digest: str,
        file_name: str,
        on_success: SuccessCallback,
        on_failure: ErrorCallback,
    ) -> StampTransaction:
        """Submit one stamp transaction.

        ``on_success`` receives the ledger transaction digest and
        ``on_failure`` a human-readable message. At most one of them runs,
        at most once.

        Raises:
            NotReadyError: if an input is empty or no signing identity is active.
            TransactionFailedError: if the signer refuses the submission outright.
        """
        missing = [
            name
            for name, value in (
                ("storage id", storage_id),
                ("digest", digest),
                ("file name", file_name),
            )
            if not value
        ]
        if missing:
            raise NotReadyError(f"Not ready for stamping: missing {', '.join(missing)}")
        sender = self._signer.active_account()
        if not sender:
            raise NotReadyError("Not ready for stamping: no active wallet account")

        transaction = build_stamp_transaction(
            package_id=self._package_id,
            module=self._module,
            function=self._function,
            storage_id=storage_id,
            digest=digest,
            file_name=file_name,
            gas_budget=self._gas_budget,
            sender=sender,
        )
        Log.info(
            f"Submitting {transaction.target} for {file_name} (blob {storage_id}) "
            f"on {self._chain} with gas budget {self._gas_budget}"
        )
        deliver_success, deliver_failure = _one_shot(on_success, on_failure)
        try:
            self._signer.sign_and_execute(
                transaction,
                chain=self._chain,
                on_success=deliver_success,
                on_error=deliver_failure,
            )
        except SignerError as exc:
            raise TransactionFailedError(str(exc) or TransactionFailedError.DEFAULT_MESSAGE) from exc
        return transaction


def _one_shot(
    on_success: SuccessCallback,
    on_failure: ErrorCallback,
) -> tuple[SuccessCallback, ErrorCallback]:
    """Wrap both callbacks so only the first terminal outcome is delivered."""
    delivered = False

    def guard(callback: Callable[[str], None], outcome: str) -> Callable[[str], None]:
        def deliver(value: str) -> None:
            nonlocal delivered
            if delivered:
                Log.warning(f"Ignoring duplicate signer {outcome} callback: {value}")
                return
            delivered = True
            callback(value)

        return deliver

    def failure(message: str) -> None:
        on_failure(message or TransactionFailedError.DEFAULT_MESSAGE)

    return guard(on_success, "success"), guard(failure, "failure")
