from pathlib import Path
from typing import Optional

from verification.constants import DEFAULT_OPTIMIZER_RUNS, NO_LICENSE, SPDX_LICENSE_CODES
from verification.encoding import encode_constructor_args, split_args
from verification.request import ChainId, VerificationRequest
from verification.sanitizer import sanitize_source, spdx_identifier
from verification.utils import _load_yaml, _read_text

VERIFICATION_KEY = "verification"
CONSTRUCTOR_KEY = "constructor"
CONSTRUCTOR_ARGS_KEY = "constructor_args"

REQUIRED_FIELDS = ("address", "contract_name", "source", "compiler_version")


class ParamsError(ValueError):
    pass


def _infer_license(source: str) -> int:
    identifier = spdx_identifier(source)
    return SPDX_LICENSE_CODES.get(identifier, NO_LICENSE)


def validate_params(config: dict) -> dict:
    """Checks the params file layout and returns its verification section."""
    if not isinstance(config, dict):
        raise ParamsError("Params file is empty or not a mapping.")

    verification = config.get(VERIFICATION_KEY)
    if not verification:
        raise ParamsError(f"'{VERIFICATION_KEY}' is not set in params file.")

    for field in REQUIRED_FIELDS:
        if not verification.get(field):
            raise ParamsError(f"'{field}' is not set in params file.")

    # YAML reads unquoted 0x literals as integers
    if not isinstance(verification["address"], str):
        raise ParamsError("'address' must be a quoted string in params file.")

    if CONSTRUCTOR_KEY in config and CONSTRUCTOR_ARGS_KEY in config:
        raise ParamsError(
            f"Provide either '{CONSTRUCTOR_KEY}' or '{CONSTRUCTOR_ARGS_KEY}' in params file, not both."
        )
    constructor = config.get(CONSTRUCTOR_KEY)
    if constructor is not None and not isinstance(constructor, list):
        raise ParamsError(f"'{CONSTRUCTOR_KEY}' must be a list of type/value entries.")

    return verification


def _constructor_args(config: dict) -> str:
    if CONSTRUCTOR_KEY in config:
        types, values = split_args(config[CONSTRUCTOR_KEY] or list())
        return encode_constructor_args(types, values)
    constructor_args = config.get(CONSTRUCTOR_ARGS_KEY)
    if constructor_args is None:
        return ""
    # YAML reads unquoted 0x literals as integers
    if not isinstance(constructor_args, str):
        raise ParamsError(f"'{CONSTRUCTOR_ARGS_KEY}' must be a quoted string in params file.")
    return constructor_args


def load_request(
    filepath: Path,
    chain_id: Optional[ChainId] = None,
    sanitize: bool = True,
) -> VerificationRequest:
    """
    Builds a verification request from a YAML params file.

    The source path is resolved relative to the params file. `chain_id`
    overrides the chain set in the file; one of the two must be present.
    """
    config = _load_yaml(filepath)
    verification = validate_params(config)

    chain_id = chain_id or verification.get("chain_id")
    if not chain_id:
        raise ParamsError("'chain_id' is not set in params file.")

    source_filepath = Path(filepath).parent / verification["source"]
    if not source_filepath.exists():
        raise ParamsError(f"Source file {source_filepath} does not exist.")
    source = _read_text(source_filepath)
    if sanitize:
        source = sanitize_source(source)

    license_code = verification.get("license")
    if license_code is None:
        license_code = _infer_license(source)

    try:
        return VerificationRequest.create(
            chain_id=chain_id,
            address=verification["address"],
            contract_name=verification["contract_name"],
            source=source,
            compiler_version=verification["compiler_version"],
            optimization=verification.get("optimization", False),
            runs=verification.get("runs", DEFAULT_OPTIMIZER_RUNS),
            constructor_args=_constructor_args(config),
            evm_version=verification.get("evm_version", ""),
            license_code=license_code,
        )
    except ValueError as e:
        raise ParamsError(f"Invalid params file {filepath}: {e}")
