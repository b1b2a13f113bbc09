import os
import time
from typing import Callable, Optional

import requests

from verification.constants import (
    CHECK_STATUS_ACTION,
    CONTRACT_MODULE,
    DEFAULT_REQUEST_TIMEOUT,
    ETHERSCAN_API_KEY_ENVVAR,
    ETHERSCAN_API_KEY_LENGTH,
    ETHERSCAN_V2_ENDPOINT,
    FAIL_MARKER,
    MAX_POLL_ATTEMPTS,
    NETWORK_EXPLORERS,
    NETWORKS,
    PASS_PREFIX,
    POLL_INTERVAL,
    STATUS_OK,
)
from verification.request import ChainId, VerificationRequest, routing_params
from verification.result import (
    SubmissionRejected,
    VerificationResult,
    VerificationStatus,
    explorer_code_url,
)


def check_api_key(envvar: str = ETHERSCAN_API_KEY_ENVVAR) -> str:
    """Returns the explorer API key set in the environment."""
    api_key = os.environ.get(envvar)
    if not api_key:
        raise ValueError(f"{envvar} is not set.")
    if not len(api_key) == ETHERSCAN_API_KEY_LENGTH:
        raise ValueError(f"{envvar} is not valid.")
    return api_key


def classify(result: str) -> VerificationStatus:
    """Maps an explorer status string onto a verification status."""
    if result.startswith(PASS_PREFIX):
        return VerificationStatus.VERIFIED
    if FAIL_MARKER in result:
        return VerificationStatus.FAILED
    return VerificationStatus.PENDING


def get_network_name(chain_id: ChainId) -> str:
    return NETWORKS.get(chain_id, f"chain {chain_id}")


class ExplorerClient:
    """
    Client for the explorer contract verification API.

    The chain id and API key travel in the query string of every call;
    everything else about a submission is form-encoded in the body.
    """

    def __init__(
        self,
        chain_id: ChainId,
        api_key: str,
        endpoint: str = ETHERSCAN_V2_ENDPOINT,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        silent: bool = False,
    ):
        self.chain_id = int(chain_id)
        self.api_key = api_key
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout
        self.silent = silent

    def __enter__(self) -> "ExplorerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _print(self, message: str) -> None:
        if not self.silent:
            print(message)

    @property
    def explorer_url(self) -> Optional[str]:
        return NETWORK_EXPLORERS.get(self.chain_id)

    def submit(self, request: VerificationRequest) -> str:
        """Submits source code for verification and returns the tracking guid."""
        if request.chain_id != self.chain_id:
            raise ValueError(
                f"Request is for chain {request.chain_id} but the client "
                f"is bound to chain {self.chain_id}"
            )

        self._print(
            f"(i) Submitting {request.contract_name} at {request.address} "
            f"on {get_network_name(self.chain_id)} for verification..."
        )
        response = self.session.post(
            self.endpoint,
            params=request.routing_params(self.api_key),
            data=request.form_fields(),
            timeout=self.timeout,
        )
        response.raise_for_status()

        data = response.json()
        if data.get("status") != STATUS_OK:
            raise SubmissionRejected(str(data.get("result") or data.get("message")))

        guid = data["result"]
        self._print(f"(i) Verification submitted; guid {guid}")
        return guid

    def check_status(self, guid: str) -> str:
        """Requests the current verification status string for a guid."""
        params = routing_params(self.chain_id, self.api_key)
        params.update(module=CONTRACT_MODULE, action=CHECK_STATUS_ACTION, guid=guid)
        response = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict) or "result" not in data:
            raise ValueError(f"Unexpected status response: {data!r}")
        return str(data["result"])

    def poll(
        self,
        guid: str,
        interval: float = POLL_INTERVAL,
        max_attempts: int = MAX_POLL_ATTEMPTS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> VerificationResult:
        """
        Checks the verification status at a fixed interval until the explorer
        reports a pass or a failure, or until `max_attempts` checks are spent.
        A request that errors out counts as an inconclusive attempt.
        """
        last_result = ""
        for attempt in range(1, max_attempts + 1):
            sleep(interval)
            try:
                last_result = self.check_status(guid)
            except (requests.RequestException, ValueError) as e:
                self._print(f"(!) Status check {attempt}/{max_attempts} failed: {e}")
                continue

            status = classify(last_result)
            if status is not VerificationStatus.PENDING:
                return VerificationResult(status=status, detail=last_result, attempts=attempt)
            self._print(f"(i) {last_result} ({attempt}/{max_attempts})")

        return VerificationResult(
            status=VerificationStatus.TIMED_OUT, detail=last_result, attempts=max_attempts
        )

    def verify(self, request: VerificationRequest, **poll_kwargs) -> VerificationResult:
        """Submits the request and waits for a terminal verification result."""
        guid = self.submit(request)
        result = self.poll(guid, **poll_kwargs)
        if result.verified:
            url = explorer_code_url(self.explorer_url, request.address)
            self._print(f"(i) {request.contract_name} verified" + (f"; see {url}" if url else ""))
        return result
