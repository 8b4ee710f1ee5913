from certifier.config.settings import Settings
from certifier.fingerprint.fingerprint import FingerprintEngine
from certifier.ledger.factory import build_submitter
from certifier.ledger.signer_base import BaseWalletSigner
from certifier.logging.logger import Log
from certifier.storage.base import BaseBlobStore
from certifier.storage.factory import BlobStoreFactory
from certifier.workflow.controller import WorkflowController


def build_controller(
    settings: Settings,
    *,
    blob_store: BaseBlobStore | None = None,
    signer: BaseWalletSigner | None = None,
) -> WorkflowController:
    """Build a WorkflowController with all required adapters."""
    Log.configure(settings.log_level)
    Log.info(
        f"Building certification workflow ({settings.app_env}): "
        f"blob store {settings.blob_store}, signer {settings.signer}, "
        f"package {settings.sui_package_id} on {settings.sui_chain}"
    )
    return WorkflowController(
        fingerprint_engine=FingerprintEngine(),
        blob_store=blob_store if blob_store is not None else BlobStoreFactory.create(settings),
        submitter=build_submitter(settings, signer),
    )
