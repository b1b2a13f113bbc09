#!/usr/bin/python3
import click

from verification.constants import LICENSE_CODES, NETWORK_EXPLORERS, NETWORKS


@click.command()
@click.option(
    "--licenses/--no-licenses",
    help="List explorer license codes",
    default=True,
)
@click.option(
    "--networks/--no-networks",
    help="List supported chain ids",
    default=True,
)
def cli(licenses, networks):
    """List the license codes and chain ids accepted by the explorer."""
    if licenses:
        click.echo("License codes")
        for code, license_name in LICENSE_CODES.items():
            click.echo(f"\t{code:>3}  {license_name}")
    if networks:
        click.echo("Networks")
        for chain_id, network_name in sorted(NETWORKS.items()):
            explorer = NETWORK_EXPLORERS.get(chain_id, "")
            click.echo(f"\t{chain_id:>9}  {network_name:<26} {explorer}")


if __name__ == "__main__":
    cli()
