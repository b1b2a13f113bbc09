from pathlib import Path

import click

from verification.constants import MAX_POLL_ATTEMPTS, POLL_INTERVAL
from verification.types import ChainId, MinInt

chain_id_option = click.option(
    "--chain-id",
    "-c",
    help="Chain id (or network name) of the deployment",
    type=ChainId(),
    required=False,
)

params_filepath_option = click.option(
    "--params-filepath",
    "-f",
    help="Filepath to the verification params YAML",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

interval_option = click.option(
    "--interval",
    help="Seconds between status checks",
    type=MinInt(1),
    default=POLL_INTERVAL,
    show_default=True,
)

max_attempts_option = click.option(
    "--max-attempts",
    help="Status checks before giving up",
    type=MinInt(1),
    default=MAX_POLL_ATTEMPTS,
    show_default=True,
)

autoconfirm_option = click.option(
    "--autoconfirm",
    help="Submit without asking for confirmation",
    is_flag=True,
    default=False,
)
