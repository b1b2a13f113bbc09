import click
from eth_utils import to_checksum_address

from verification.constants import NETWORKS


class MinInt(click.ParamType):
    name = "minint"

    def __init__(self, min_value):
        self.min_value = min_value

    def convert(self, value, param, ctx):
        try:
            ivalue = int(value)
        except ValueError:
            self.fail(f"{value} is not a valid integer", param, ctx)
        if ivalue < self.min_value:
            self.fail(
                f"{value} is less than the minimum allowed value of {self.min_value}", param, ctx
            )
        return ivalue


class ChecksumAddress(click.ParamType):
    name = "checksum_address"

    def convert(self, value, param, ctx):
        try:
            value = to_checksum_address(value=value)
        except ValueError:
            self.fail(f"Invalid ethereum address '{value}'", param, ctx)
        else:
            return value


class ChainId(click.ParamType):
    """A chain id, given as a number or as a known network name."""

    name = "chain_id"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        if value.isdigit():
            return int(value)
        for chain_id, network_name in NETWORKS.items():
            if value.lower() == network_name.lower():
                return chain_id
        self.fail(f"Unknown network '{value}'; use a chain id or one of the listed names", param, ctx)
