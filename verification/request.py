import re
from typing import Dict, NamedTuple, Union

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from verification.constants import (
    API_KEY_PARAM,
    CHAIN_ID_PARAM,
    COMPILER_VERSION_PATTERN,
    CONTRACT_MODULE,
    DEFAULT_OPTIMIZER_RUNS,
    LICENSE_CODES,
    NO_LICENSE,
    SINGLE_FILE_CODE_FORMAT,
    SPDX_LICENSE_CODES,
    VERIFY_SOURCE_ACTION,
)
from verification.encoding import normalize_constructor_args

ChainId = int
LicenseCode = int


def resolve_license(value: Union[int, str]) -> LicenseCode:
    """Resolves a license code, SPDX identifier or license name to an explorer code."""
    if isinstance(value, int) or (isinstance(value, str) and value.strip().isdigit()):
        code = int(value)
        if code not in LICENSE_CODES:
            raise ValueError(f"Unknown license code {code}")
        return code

    name = value.strip()
    if name in SPDX_LICENSE_CODES:
        return SPDX_LICENSE_CODES[name]
    for code, license_name in LICENSE_CODES.items():
        if name.lower() == license_name.lower():
            return code
    raise ValueError(f"Unknown license '{value}'")


def routing_params(chain_id: ChainId, api_key: str) -> Dict[str, str]:
    """Query string parameters that select the chain and authenticate the call."""
    return {CHAIN_ID_PARAM: str(chain_id), API_KEY_PARAM: api_key}


def validate_compiler_version(compiler_version: str) -> str:
    if not re.match(COMPILER_VERSION_PATTERN, compiler_version):
        raise ValueError(
            f"Invalid compiler version '{compiler_version}'; "
            f"expected a full version like 'v0.8.23+commit.f704f362'"
        )
    return compiler_version


class VerificationRequest(NamedTuple):
    """Everything the explorer needs to verify one contract."""

    chain_id: ChainId
    address: ChecksumAddress
    contract_name: str
    source: str
    compiler_version: str
    optimization: bool
    runs: int
    constructor_args: str
    evm_version: str
    license_code: LicenseCode

    @classmethod
    def create(
        cls,
        chain_id: ChainId,
        address: str,
        contract_name: str,
        source: str,
        compiler_version: str,
        optimization: bool = False,
        runs: int = DEFAULT_OPTIMIZER_RUNS,
        constructor_args: str = "",
        evm_version: str = "",
        license_code: Union[int, str] = NO_LICENSE,
    ) -> "VerificationRequest":
        """Builds a validated request, normalizing address, arguments and license."""
        if not contract_name:
            raise ValueError("Contract name is required")
        if not source.strip():
            raise ValueError("Source code is empty")
        if not isinstance(optimization, bool):
            raise ValueError(f"Optimization must be true or false; got {optimization!r}")
        if not isinstance(runs, int) or isinstance(runs, bool):
            raise ValueError(f"Optimizer runs must be an integer; got {runs!r}")
        if runs < 0:
            raise ValueError(f"Optimizer runs must not be negative; got {runs}")

        return cls(
            chain_id=int(chain_id),
            address=to_checksum_address(address),
            contract_name=contract_name,
            source=source,
            compiler_version=validate_compiler_version(compiler_version),
            optimization=optimization,
            runs=runs,
            constructor_args=normalize_constructor_args(constructor_args),
            evm_version=evm_version or "",
            license_code=resolve_license(license_code),
        )

    def routing_params(self, api_key: str) -> Dict[str, str]:
        return routing_params(self.chain_id, api_key)

    def form_fields(self) -> Dict[str, str]:
        """Form-encoded body of the submission; never carries the routing parameters."""
        fields = {
            "module": CONTRACT_MODULE,
            "action": VERIFY_SOURCE_ACTION,
            "contractaddress": self.address,
            "sourceCode": self.source,
            "codeformat": SINGLE_FILE_CODE_FORMAT,
            "contractname": self.contract_name,
            "compilerversion": self.compiler_version,
            "optimizationUsed": "1" if self.optimization else "0",
            "runs": str(self.runs),
            "constructorArguements": self.constructor_args,  # sic
            "evmversion": self.evm_version,
            "licenseType": str(self.license_code),
        }
        return fields
