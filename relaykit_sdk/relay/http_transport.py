"""
HTTP transport for the relay service.

Requests go through a ``requests.Session`` with a urllib3 retry policy. The
session is blocking, so each call runs in a worker thread to satisfy the
async ``RelayTransport`` contract.
"""
import asyncio
import logging
import urllib.parse
from typing import Any, Optional

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import RelayConfig
from ..exceptions import (
    RelayError, RelayConnectionError, RelayResponseError,
    RelayTimeoutError, TaskNotFoundError
)
from ..models import TaskStatus
from ._rate_limited_log import rate_limited_log
from .transport import RelayRequest, RelayTransport

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class HttpRelayTransport(RelayTransport):
    """
    Relay client speaking the relay service's REST API.

    Wire format:
        POST {base_url}/relay/transactions       -> {"taskId": str}
        GET  {base_url}/relay/tasks/{id}/status  -> {"status": int, "receipt"?: {...}}

    HTTP-layer retries cover status queries only. Submissions are sent once
    so that a retry can never execute the same call twice on-chain.
    """

    SUBMIT_PATH = "/relay/transactions"
    STATUS_PATH = "/relay/tasks/{task_id}/status"

    def __init__(
        self,
        config: RelayConfig,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the transport

        Args:
            config: Relay service settings
            session: Pre-built session to use instead of the default one
            logger: Optional logger instance to use for debug/info logging
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or self._build_session(config)

    @staticmethod
    def _build_session(config: RelayConfig) -> requests.Session:
        session = requests.Session()
        retries = Retry(
            total=config.retry_count,
            backoff_factor=config.backoff_factor,
            status_forcelist=[500, 502, 503, 504],
            # Only idempotent status reads are retried on response errors
            allowed_methods=["GET"],
            raise_on_status=False,
            connect=config.retry_count,
            read=config.retry_count,
            # Errors raised after the request was sent are not retried
            other=0
        )
        adapter = HTTPAdapter(max_retries=retries)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({
            API_KEY_HEADER: config.api_key,
            "Accept": "application/json",
        })
        return session

    async def submit(self, request: RelayRequest) -> str:
        url = f"{self.config.base_url}{self.SUBMIT_PATH}"
        self.logger.debug(
            f"Submitting relay request: chainId={request.chain_id} to={request.to} "
            f"payment={request.payment.type}"
        )

        payload = await asyncio.to_thread(self._request, "POST", url, json=request.to_wire())

        task_id = payload.get("taskId") if isinstance(payload, dict) else None
        if not isinstance(task_id, str) or not task_id:
            raise RelayResponseError(f"Missing taskId in relay response: {payload}")

        self.logger.info(f"Relay task created: {task_id}")
        return task_id

    async def query_status(self, task_id: str) -> TaskStatus:
        url = self.config.base_url + self.STATUS_PATH.format(
            task_id=urllib.parse.quote(task_id, safe="")
        )

        try:
            payload = await asyncio.to_thread(self._request, "GET", url)
        except RelayResponseError as e:
            if e.status_code == 404:
                raise TaskNotFoundError(task_id) from e
            raise

        try:
            status = TaskStatus.model_validate(payload)
        except ValidationError as e:
            raise RelayResponseError(f"Malformed status for task {task_id}: {e}") from e

        self.logger.debug(f"Task {task_id} status: {status.status}")
        return status

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, url: str, **kwargs) -> Any:
        """
        Perform one HTTP request and decode the JSON body

        Raises:
            RelayTimeoutError: If the request times out
            RelayConnectionError: If the relay service cannot be reached
            RelayResponseError: On a non-2xx status or a non-JSON body
            RelayError: For any other transport failure
        """
        try:
            response = self.session.request(method, url, timeout=self.config.timeout, **kwargs)
        except requests.Timeout as e:
            self.logger.error(f"Relay request timed out: {method} {url}")
            raise RelayTimeoutError(f"Relay request timed out after {self.config.timeout}s") from e
        except requests.ConnectionError as e:
            rate_limited_log(
                f"Relay service unreachable at {self.config.base_url}",
                level="error",
                logger_instance=self.logger
            )
            raise RelayConnectionError(f"Failed to connect to relay service: {str(e)}") from e
        except requests.RequestException as e:
            self.logger.error(f"Relay request failed: {e}")
            raise RelayError(f"Relay request failed: {str(e)}") from e

        if response.status_code >= 400:
            message, error_code = self._error_details(response)
            self.logger.warning(f"Relay service returned {response.status_code}: {message}")
            raise RelayResponseError(
                f"Relay service returned {response.status_code}: {message}",
                status_code=response.status_code,
                error_code=error_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise RelayResponseError(
                f"Invalid JSON response from relay service: {str(e)}",
                status_code=response.status_code
            ) from e

    @staticmethod
    def _error_details(response: requests.Response):
        """Pull a message and error code out of an error response, if it has them"""
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason or "", None

        if not isinstance(body, dict):
            return str(body), None
        message = body.get("message") or body.get("error") or str(body)
        code = body.get("code")
        return str(message), str(code) if code is not None else None
