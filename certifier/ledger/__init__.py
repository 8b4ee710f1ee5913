from certifier.ledger.exceptions import NotReadyError, SignerError, TransactionFailedError
from certifier.ledger.factory import SignerFactory, build_submitter
from certifier.ledger.signer_base import BaseWalletSigner
from certifier.ledger.submitter import AttestationSubmitter
from certifier.ledger.transaction import StampTransaction, build_stamp_transaction

__all__ = [
    "AttestationSubmitter",
    "BaseWalletSigner",
    "NotReadyError",
    "SignerError",
    "SignerFactory",
    "StampTransaction",
    "TransactionFailedError",
    "build_stamp_transaction",
    "build_submitter",
]
