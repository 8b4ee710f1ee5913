from enum import Enum


class WorkflowState(str, Enum):
    IDLE = "idle"
    HASHING = "hashing"
    UPLOADING = "uploading"
    STAMPING = "stamping"
    SUCCESS = "success"
    ERROR = "error"


# An operation is in flight; new triggers are ignored.
BUSY_STATES = frozenset({WorkflowState.HASHING, WorkflowState.UPLOADING, WorkflowState.STAMPING})

# States from which upload and stamping may start.
READY_STATES = frozenset({WorkflowState.IDLE, WorkflowState.ERROR})
