from certifier.workflow.controller import WorkflowController
from certifier.workflow.factory import build_controller
from certifier.workflow.models import CertificationRecord, CertificationRequest, WorkflowSnapshot
from certifier.workflow.states import WorkflowState

__all__ = [
    "CertificationRecord",
    "CertificationRequest",
    "WorkflowController",
    "WorkflowSnapshot",
    "WorkflowState",
    "build_controller",
]
