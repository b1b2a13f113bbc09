import pytest
import requests

API_KEY = "A" * 34
CHAIN_ID = 11155111
ADDRESS = "0x0000000000000000000000000000000000001234"
COMPILER_VERSION = "v0.8.23+commit.f704f362"

FLATTENED_SOURCE = """\
// Sources flattened with hardhat v2.22.2 https://hardhat.org

// SPDX-License-Identifier: MIT

// File contracts/Named.sol

pragma solidity ^0.8.23;

abstract contract Named {}

// File contracts/Token.sol

// SPDX-License-Identifier: MIT
pragma solidity ^0.8.23;

contract Token is Named {}
"""


class FakeResponse:
    def __init__(self, payload=None, status_code=200, error=None):
        self.payload = payload
        self.status_code = status_code
        self.error = error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.error:
            raise self.error
        return self.payload


class FakeSession:
    """Replays scripted responses and records every call made."""

    def __init__(self, post_responses=None, get_responses=None):
        self.post_responses = list(post_responses or [])
        self.get_responses = list(get_responses or [])
        self.posts = list()
        self.gets = list()
        self.closed = False

    @staticmethod
    def _next(responses):
        response = responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, params=None, data=None, timeout=None):
        self.posts.append({"url": url, "params": params, "data": data})
        return self._next(self.post_responses)

    def get(self, url, params=None, timeout=None):
        self.gets.append({"url": url, "params": params})
        return self._next(self.get_responses)

    def close(self):
        self.closed = True


def status_response(result):
    status = "1" if result.startswith("Pass") else "0"
    return FakeResponse({"status": status, "message": "OK", "result": result})


@pytest.fixture
def no_sleep():
    calls = list()
    return calls.append, calls


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("ETHERSCAN_API_KEY", API_KEY)
    return API_KEY


@pytest.fixture
def params_file(tmp_path):
    source_filepath = tmp_path / "Token.flat.sol"
    source_filepath.write_text(FLATTENED_SOURCE)
    params_filepath = tmp_path / "token.yml"
    params_filepath.write_text(
        f"""\
verification:
  chain_id: {CHAIN_ID}
  address: "{ADDRESS}"
  contract_name: Token
  source: Token.flat.sol
  compiler_version: {COMPILER_VERSION}
  optimization: true
  runs: 1000
  evm_version: paris
constructor:
  - type: address
    value: "{ADDRESS}"
  - type: uint256
    value: 1
"""
    )
    return params_filepath
