"""
In-memory transport for the relay service.

Nothing leaves the process: submissions are recorded and tasks advance only
when ``set_status`` is called. Useful for local development and tests.
"""
import logging
import threading
import uuid
from typing import Dict, List, Optional

from ..exceptions import TaskNotFoundError
from ..models import TaskReceipt, TaskState, TaskStatus
from .transport import RelayRequest, RelayTransport

logger = logging.getLogger(__name__)


class StubTransport(RelayTransport):
    """
    A relay that keeps tasks in memory.

    Every submitted task starts as PENDING.
    """

    def __init__(self):
        self.requests: List[RelayRequest] = []
        self._tasks: Dict[str, TaskStatus] = {}
        self._lock = threading.Lock()

    async def submit(self, request: RelayRequest) -> str:
        task_id = uuid.uuid4().hex
        with self._lock:
            self.requests.append(request)
            self._tasks[task_id] = TaskStatus(status=TaskState.PENDING)
        logger.debug(f"Stub relay accepted task {task_id} for {request.to}")
        return task_id

    async def query_status(self, task_id: str) -> TaskStatus:
        with self._lock:
            status = self._tasks.get(task_id)
        if status is None:
            raise TaskNotFoundError(task_id)
        return status

    def set_status(self, task_id: str, status: int, tx_hash: Optional[str] = None) -> None:
        """
        Move a task to a new status

        Args:
            task_id: Task to update
            status: New status code
            tx_hash: Transaction hash to attach as the task receipt

        Raises:
            TaskNotFoundError: If the task was never submitted
        """
        receipt = TaskReceipt(transaction_hash=tx_hash) if tx_hash else None
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            self._tasks[task_id] = TaskStatus(status=status, receipt=receipt)
