import click

from verification.confirm import _confirm_request
from verification.explorer import ExplorerClient, check_api_key
from verification.options import (
    autoconfirm_option,
    chain_id_option,
    interval_option,
    max_attempts_option,
    params_filepath_option,
)
from verification.params import load_request
from verification.result import VerificationError, raise_for_result
from verification.types import ChecksumAddress
from verification.utils import params_filepath_from_name


@click.command()
@params_filepath_option
@click.option(
    "--name",
    "-n",
    help="Name of a params file in the project params directory",
    type=click.STRING,
    required=False,
)
@chain_id_option
@click.option(
    "--address",
    "-a",
    help="Contract address; overrides the params file",
    type=ChecksumAddress(),
    required=False,
)
@interval_option
@max_attempts_option
@autoconfirm_option
@click.option(
    "--no-sanitize",
    help="Upload the source file as is",
    is_flag=True,
    default=False,
)
def cli(params_filepath, name, chain_id, address, interval, max_attempts, autoconfirm, no_sanitize):
    """Verify a deployed contract's source code on the block explorer."""
    if not (bool(params_filepath) ^ bool(name)):
        raise click.BadOptionUsage(
            option_name="--params-filepath",
            message=(
                f"Provide either 'params-filepath' or 'name'; "
                f"got {params_filepath}, {name}"
            ),
        )

    try:
        params_filepath = params_filepath or params_filepath_from_name(name=name)
        request = load_request(params_filepath, chain_id=chain_id, sanitize=not no_sanitize)
        api_key = check_api_key()
    except (ValueError, VerificationError) as e:
        raise click.ClickException(str(e))

    if address:
        request = request._replace(address=address)

    if not autoconfirm:
        _confirm_request(request)

    with ExplorerClient(chain_id=request.chain_id, api_key=api_key) as client:
        try:
            result = client.verify(request, interval=interval, max_attempts=max_attempts)
            raise_for_result(result)
        except VerificationError as e:
            raise click.ClickException(f"{type(e).__name__}: {e}")


if __name__ == "__main__":
    cli()
