from collections.abc import Callable
from functools import partial
from types import TracebackType

from certifier.errors import CertificationError, ErrorKind
from certifier.files.exceptions import FileReadError
from certifier.files.models import SelectedFile
from certifier.fingerprint.fingerprint import FingerprintEngine
from certifier.ledger.submitter import AttestationSubmitter
from certifier.logging.logger import Log
from certifier.storage.base import BaseBlobStore
from certifier.workflow.models import CertificationRecord, CertificationRequest, WorkflowSnapshot
from certifier.workflow.states import BUSY_STATES, READY_STATES, WorkflowState

Listener = Callable[[WorkflowSnapshot], None]


class WorkflowController:
    """Drives one file through hashing, upload and ledger stamping.

    The controller is the only writer of workflow state. Every public
    operation runs to completion on the caller's thread; the signer's
    finality callback is the only event that may arrive later. Each
    operation bumps a generation counter and callbacks carrying an older
    generation are ignored, so a reset or a new file selection cannot be
    overwritten by a late result.

    Lifecycle: create (see ``build_controller``), use, then ``close()`` or
    leave the ``with`` block.
    """

    def __init__(
        self,
        *,
        fingerprint_engine: FingerprintEngine,
        blob_store: BaseBlobStore,
        submitter: AttestationSubmitter,
    ) -> None:
        self._fingerprint_engine = fingerprint_engine
        self._blob_store = blob_store
        self._submitter = submitter
        self._request = CertificationRequest()
        self._record: CertificationRecord | None = None
        self._generation = 0
        self._listeners: list[Listener] = []
        self._closed = False

    def __enter__(self) -> "WorkflowController":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def state(self) -> WorkflowState:
        return self._request.state

    @property
    def file(self) -> SelectedFile | None:
        return self._request.file

    @property
    def digest(self) -> str:
        return self._request.digest

    @property
    def storage_id(self) -> str:
        return self._request.storage_id

    @property
    def last_error(self) -> str:
        return self._request.last_error

    @property
    def last_error_kind(self) -> ErrorKind | None:
        return self._request.last_error_kind

    @property
    def record(self) -> CertificationRecord | None:
        return self._record

    def snapshot(self) -> WorkflowSnapshot:
        request = self._request
        return WorkflowSnapshot(
            state=request.state,
            file_name=request.file.name if request.file else None,
            file_size=request.file.size if request.file else None,
            digest=request.digest,
            storage_id=request.storage_id,
            last_error=request.last_error,
            last_error_kind=request.last_error_kind,
            record=self._record,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select_file(self, file: SelectedFile) -> None:
        """Start a new attempt for ``file`` and compute its digest."""
        self._ensure_open()
        generation = self._next_generation()
        self._request = CertificationRequest(file=file)
        self._record = None
        Log.info(f"Selected {file.name} ({file.size} bytes)")
        self._transition(WorkflowState.HASHING)

        try:
            digest = self._fingerprint_engine.fingerprint(file)
        except Exception as exc:
            self._fail(exc, generation)
            return
        if not self._is_current(generation):
            return
        self._request.digest = digest
        self._transition(WorkflowState.IDLE)

    def upload(self) -> None:
        """Upload the selected file without stamping it."""
        self._ensure_open()
        if self._ignore_when_busy("upload"):
            return
        problem = self._upload_problem()
        if problem:
            self._reject(problem)
            return
        if self._run_upload():
            self._transition(WorkflowState.IDLE)

    def stamp(self) -> None:
        """Stamp the already uploaded file on the ledger."""
        self._ensure_open()
        if self._ignore_when_busy("stamp"):
            return
        problem = self._stamp_problem()
        if problem:
            self._reject(problem)
            return
        self._run_stamp()

    def upload_and_stamp(self) -> None:
        """Upload the selected file and stamp the returned storage id."""
        self._ensure_open()
        if self._ignore_when_busy("upload_and_stamp"):
            return
        problem = self._upload_problem() or self._identity_problem()
        if problem:
            self._reject(problem)
            return
        if self._run_upload():
            self._run_stamp()

    def reset(self) -> None:
        """Drop the current attempt and return to Idle. Always permitted."""
        self._next_generation()
        self._request = CertificationRequest()
        self._record = None
        self._transition(WorkflowState.IDLE)

    def close(self) -> None:
        if self._closed:
            return
        self._next_generation()
        self._closed = True
        self._listeners.clear()
        self._blob_store.close()
        Log.debug("Workflow controller closed")

    def _run_upload(self) -> bool:
        generation = self._next_generation()
        request = self._request
        file = self._selected_file()
        request.storage_id = ""
        self._clear_error()
        self._transition(WorkflowState.UPLOADING)

        try:
            data = file.read_bytes()
            if len(data) != file.size:
                raise FileReadError(
                    f"{file.name} changed since it was hashed "
                    f"({file.size} bytes selected, {len(data)} bytes read); select it again"
                )
            stored = self._blob_store.store(
                data,
                size=file.size,
                content_type=file.content_type,
            )
        except Exception as exc:
            self._fail(exc, generation)
            return False
        if not self._is_current(generation):
            Log.warning(f"Discarding upload result {stored.blob_id} for a superseded attempt")
            return False
        request.storage_id = stored.blob_id
        Log.info(f"Uploaded {file.name} as blob {stored.blob_id}", blob_id=stored.blob_id)
        return True

    def _run_stamp(self) -> None:
        generation = self._next_generation()
        request = self._request
        file = self._selected_file()
        self._clear_error()
        self._transition(WorkflowState.STAMPING)

        try:
            self._submitter.submit(
                storage_id=request.storage_id,
                digest=request.digest,
                file_name=file.name,
                on_success=partial(self._on_stamp_success, generation),
                on_failure=partial(self._on_stamp_failure, generation),
            )
        except Exception as exc:
            if self.state is WorkflowState.STAMPING:
                self._fail(exc, generation)
            else:
                Log.error(f"Signer raised after reporting an outcome: {exc}")

    def _on_stamp_success(self, generation: int, transaction_digest: str) -> None:
        if not self._accepts_callback(generation):
            Log.warning(
                f"Ignoring stale stamp success {transaction_digest} for attempt {generation}"
            )
            return
        request = self._request
        file = self._selected_file()
        self._record = CertificationRecord(
            file_name=file.name,
            storage_id=request.storage_id,
            digest=request.digest,
            ledger_transaction_id=transaction_digest,
        )
        Log.info(
            f"Stamped {file.name} in transaction {transaction_digest}",
            transaction=transaction_digest,
        )
        self._transition(WorkflowState.SUCCESS)

    def _on_stamp_failure(self, generation: int, message: str) -> None:
        if not self._accepts_callback(generation):
            Log.warning(f"Ignoring stale stamp failure for attempt {generation}: {message}")
            return
        self._record_error(message, ErrorKind.TRANSACTION_FAILED)

    def _selected_file(self) -> SelectedFile:
        if self._request.file is None:
            raise ValueError("CertificationRequest.file must be set before upload or stamping")
        return self._request.file

    def _accepts_callback(self, generation: int) -> bool:
        return self._is_current(generation) and self.state is WorkflowState.STAMPING

    def _upload_problem(self) -> str:
        request = self._request
        if request.state not in READY_STATES:
            return f"Cannot start while the workflow is {request.state.value}"
        if request.file is None:
            return "Please select a file first"
        if not request.digest:
            return "File hash has not been computed yet"
        return ""

    def _stamp_problem(self) -> str:
        problem = self._upload_problem()
        if problem:
            return problem
        if not self._request.storage_id:
            return "Please upload the file before stamping"
        return self._identity_problem()

    def _identity_problem(self) -> str:
        if not self._submitter.signing_identity():
            return "Please connect your wallet to stamp the file"
        return ""

    def _ignore_when_busy(self, operation: str) -> bool:
        if self.state in BUSY_STATES:
            Log.debug(f"Ignoring {operation}: workflow is {self.state.value}")
            return True
        return False

    def _reject(self, message: str) -> None:
        Log.warning(f"Rejected: {message}", kind=ErrorKind.VALIDATION.value)
        self._request.last_error = message
        self._request.last_error_kind = ErrorKind.VALIDATION
        self._notify()

    def _fail(self, exc: Exception, generation: int) -> None:
        if not self._is_current(generation):
            Log.warning(f"Discarding failure for a superseded attempt: {exc}")
            return
        if isinstance(exc, CertificationError):
            kind = exc.kind
        else:
            kind = ErrorKind.UNEXPECTED
        self._record_error(str(exc) or type(exc).__name__, kind)

    def _record_error(self, message: str, kind: ErrorKind) -> None:
        Log.error(f"{kind.value}: {message}", kind=kind.value, stage=self.state.value)
        self._request.last_error = message
        self._request.last_error_kind = kind
        self._transition(WorkflowState.ERROR)

    def _clear_error(self) -> None:
        self._request.last_error = ""
        self._request.last_error_kind = None

    def _transition(self, state: WorkflowState) -> None:
        previous = self._request.state
        self._request.state = state
        Log.info(
            f"Workflow {previous.value} -> {state.value}",
            state=state.value,
            previous=previous.value,
        )
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as exc:
                Log.error(f"Workflow listener failed: {exc}")

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Workflow controller is closed")
