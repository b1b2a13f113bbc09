import click

from verification.explorer import ExplorerClient, check_api_key
from verification.options import interval_option, max_attempts_option
from verification.result import VerificationError, raise_for_result
from verification.types import ChainId


@click.command()
@click.option(
    "--guid",
    "-g",
    help="Tracking guid returned by a verification submission",
    type=click.STRING,
    required=True,
)
@click.option(
    "--chain-id",
    "-c",
    help="Chain id (or network name) the submission was made for",
    type=ChainId(),
    required=True,
)
@interval_option
@max_attempts_option
def cli(guid, chain_id, interval, max_attempts):
    """Wait for the result of an earlier verification submission."""
    try:
        api_key = check_api_key()
    except ValueError as e:
        raise click.ClickException(str(e))

    with ExplorerClient(chain_id=chain_id, api_key=api_key) as client:
        result = client.poll(guid, interval=interval, max_attempts=max_attempts)
        try:
            raise_for_result(result)
        except VerificationError as e:
            raise click.ClickException(f"{type(e).__name__}: {e}")
    click.echo(f"(i) {result.detail}")


if __name__ == "__main__":
    cli()
