from dataclasses import dataclass

from certifier.errors import ErrorKind
from certifier.files.models import SelectedFile
from certifier.workflow.states import BUSY_STATES, WorkflowState


@dataclass(slots=True)
class CertificationRequest:
    """Per-attempt working data, owned and mutated only by the controller."""

    file: SelectedFile | None = None
    digest: str = ""
    storage_id: str = ""
    state: WorkflowState = WorkflowState.IDLE
    last_error: str = ""
    last_error_kind: ErrorKind | None = None


@dataclass(frozen=True)
class CertificationRecord:
    """Proof that a file's digest and storage id were anchored on the ledger."""

    file_name: str
    storage_id: str
    digest: str
    ledger_transaction_id: str

    def blob_url(self, aggregator_url: str) -> str:
        return f"{aggregator_url.rstrip('/')}/v1/blobs/{self.storage_id}"

    def transaction_url(self, explorer_url: str) -> str:
        return f"{explorer_url.rstrip('/')}/tx/{self.ledger_transaction_id}"


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Immutable view of the workflow handed to observers."""

    state: WorkflowState
    file_name: str | None = None
    file_size: int | None = None
    digest: str = ""
    storage_id: str = ""
    last_error: str = ""
    last_error_kind: ErrorKind | None = None
    record: CertificationRecord | None = None

    @property
    def busy(self) -> bool:
        return self.state in BUSY_STATES
