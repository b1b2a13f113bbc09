from verification.constants import LICENSE_CODES
from verification.explorer import get_network_name
from verification.request import VerificationRequest


def _confirm_submission(contract_name: str) -> None:
    """Asks the user to confirm the submission of a single contract."""
    answer = input(f"Submit {contract_name} for verification Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting verification!")
        exit(-1)


def _confirm_request(request: VerificationRequest) -> None:
    """Shows the verification settings and asks the user to confirm them."""
    print(f"\nVerification settings for {request.contract_name}")
    print(f"\tnetwork={get_network_name(request.chain_id)} ({request.chain_id})")
    print(f"\taddress={request.address}")
    print(f"\tcompiler={request.compiler_version}")
    print(f"\toptimization={request.optimization} (runs={request.runs})")
    print(f"\tevm_version={request.evm_version or 'default'}")
    print(f"\tlicense={LICENSE_CODES[request.license_code]}")
    if request.constructor_args:
        print(f"\tconstructor_args=0x{request.constructor_args}")
    else:
        print("\t(i) No constructor arguments")
    _confirm_submission(request.contract_name)
