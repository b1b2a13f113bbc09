import pytest
from click.testing import CliRunner
from eth_utils import to_checksum_address

from scripts import check_verification, list_codes, sanitize_source, verify
from tests.conftest import ADDRESS, CHAIN_ID, FLATTENED_SOURCE, FakeResponse, FakeSession, status_response
from verification.explorer import ExplorerClient

GUID = "guid-1234"


@pytest.fixture
def runner():
    return CliRunner()


def _patch_client(monkeypatch, module, session):
    class ScriptedClient(ExplorerClient):
        def __init__(self, **kwargs):
            super().__init__(session=session, **kwargs)

        def poll(self, guid, **kwargs):
            return super().poll(guid, sleep=lambda seconds: None, **kwargs)

    monkeypatch.setattr(module, "ExplorerClient", ScriptedClient)


def test_verify(runner, monkeypatch, api_key, params_file):
    session = FakeSession(
        post_responses=[FakeResponse({"status": "1", "message": "OK", "result": GUID})],
        get_responses=[status_response("Pending in queue"), status_response("Pass - Verified")],
    )
    _patch_client(monkeypatch, verify, session)

    result = runner.invoke(verify.cli, ["-f", str(params_file), "--autoconfirm"])

    assert result.exit_code == 0, result.output
    (call,) = session.posts
    assert call["params"]["chainid"] == str(CHAIN_ID)
    assert call["data"]["contractname"] == "Token"
    assert "Sources flattened with" not in call["data"]["sourceCode"]
    assert "Token verified" in result.output


def test_verify_overrides(runner, monkeypatch, api_key, params_file):
    other_address = "0x000000000000000000000000000000000000abcd"
    session = FakeSession(
        post_responses=[FakeResponse({"status": "1", "message": "OK", "result": GUID})],
        get_responses=[status_response("Pass - Verified")],
    )
    _patch_client(monkeypatch, verify, session)

    result = runner.invoke(
        verify.cli,
        ["-f", str(params_file), "-c", "polygon amoy testnet", "-a", other_address, "--autoconfirm"],
    )

    assert result.exit_code == 0, result.output
    (call,) = session.posts
    assert call["params"]["chainid"] == "80002"
    assert call["data"]["contractaddress"] == to_checksum_address(other_address)


def test_verify_reports_failure(runner, monkeypatch, api_key, params_file):
    session = FakeSession(
        post_responses=[FakeResponse({"status": "1", "message": "OK", "result": GUID})],
        get_responses=[
            status_response(
                "Fail - Unable to verify. Compiled contract deployment bytecode does NOT match"
            )
        ],
    )
    _patch_client(monkeypatch, verify, session)

    result = runner.invoke(verify.cli, ["-f", str(params_file), "--autoconfirm"])

    assert result.exit_code == 1
    assert "BytecodeMismatch" in result.output


def test_verify_reports_rejection(runner, monkeypatch, api_key, params_file):
    session = FakeSession(
        post_responses=[FakeResponse({"status": "0", "message": "NOTOK", "result": "Invalid API Key"})]
    )
    _patch_client(monkeypatch, verify, session)

    result = runner.invoke(verify.cli, ["-f", str(params_file), "--autoconfirm"])

    assert result.exit_code == 1
    assert "SubmissionRejected: Invalid API Key" in result.output
    assert session.gets == []


def test_verify_aborts_without_confirmation(runner, monkeypatch, api_key, params_file):
    session = FakeSession()
    _patch_client(monkeypatch, verify, session)

    result = runner.invoke(verify.cli, ["-f", str(params_file)], input="n\n")

    assert result.exit_code != 0
    assert "Verification settings for Token" in result.output
    assert f"address={ADDRESS}" in result.output
    assert session.posts == []


def test_verify_requires_params_source(runner, api_key, params_file):
    result = runner.invoke(verify.cli, ["--autoconfirm"])
    assert result.exit_code == 2

    result = runner.invoke(verify.cli, ["-f", str(params_file), "-n", "example", "--autoconfirm"])
    assert result.exit_code == 2


def test_verify_requires_api_key(runner, monkeypatch, params_file):
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
    result = runner.invoke(verify.cli, ["-f", str(params_file), "--autoconfirm"])
    assert result.exit_code == 1
    assert "ETHERSCAN_API_KEY is not set" in result.output


def test_check_verification(runner, monkeypatch, api_key):
    session = FakeSession(get_responses=[status_response("Pass - Verified")])
    _patch_client(monkeypatch, check_verification, session)

    result = runner.invoke(check_verification.cli, ["-g", GUID, "-c", str(CHAIN_ID)])

    assert result.exit_code == 0, result.output
    assert session.gets[0]["params"]["guid"] == GUID
    assert "Pass - Verified" in result.output


def test_check_verification_times_out(runner, monkeypatch, api_key):
    session = FakeSession(get_responses=[status_response("Pending in queue")] * 2)
    _patch_client(monkeypatch, check_verification, session)

    result = runner.invoke(
        check_verification.cli, ["-g", GUID, "-c", "sepolia testnet", "--max-attempts", "2"]
    )

    assert result.exit_code == 1
    assert "VerificationTimeout" in result.output
    assert len(session.gets) == 2


def test_sanitize_source(runner, tmp_path):
    source = tmp_path / "Token.flat.sol"
    source.write_text(FLATTENED_SOURCE)
    output = tmp_path / "out" / "Token.sol"

    result = runner.invoke(sanitize_source.cli, ["-s", str(source), "-o", str(output)])

    assert result.exit_code == 0, result.output
    cleaned = output.read_text()
    assert cleaned.count("SPDX-License-Identifier") == 1
    assert source.read_text() == FLATTENED_SOURCE


def test_list_codes(runner):
    result = runner.invoke(list_codes.cli, [])

    assert result.exit_code == 0
    assert "MIT License (MIT)" in result.output
    assert "11155111" in result.output

    result = runner.invoke(list_codes.cli, ["--no-licenses"])
    assert "MIT License" not in result.output
