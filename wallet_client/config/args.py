"""Command-line parsing for the wallet client.

Arguments are a positional command (``balance`` or ``price``) followed by
flags of the form ``--key=value``. Any problem prints the usage text to
stderr and exits with status 1.
"""

import sys
from collections.abc import Sequence
from dataclasses import MISSING, fields

from wallet_client.clients.models import ClientConfig, Command, CredentialsType, User

_DEFAULTS = {f.name: f.default for f in fields(ClientConfig) if f.default is not MISSING}

_BOOL_KEYS = {"watch", "unary_watch", "affinity"}
_STR_KEYS = {"wallet_server", "stats_server", "gcp_client_project", "route"}


class UsageError(ValueError):
    """Raised for malformed arguments and for --help."""


def parse_bool(value: str) -> bool:
    """Permissive boolean: only "true" (any case) is true, anything else is false."""
    return value.lower() == "true"


def parse_args(argv: Sequence[str]) -> ClientConfig:
    """Turn an argument list into a ClientConfig or raise UsageError."""
    command: Command | None = None
    values: dict = {}

    for arg in argv:
        if not arg.startswith("--"):
            if command is not None:
                raise UsageError(
                    f"Command already specified. Additional flags must be of the form --arg=value: {arg}"
                )
            try:
                command = Command(arg)
            except ValueError:
                raise UsageError(f"Command must be either balance or price: {arg}") from None
            continue

        key, sep, value = arg[2:].partition("=")
        if key == "help":
            raise UsageError("")
        if not sep:
            raise UsageError("All flags must be of the form --arg=value")

        if key in _STR_KEYS:
            values[key] = value
        elif key in _BOOL_KEYS:
            values[key] = parse_bool(value)
        elif key == "user":
            try:
                values["user"] = User(value)
            except ValueError:
                raise UsageError(f"User must be either Alice or Bob: {value}") from None
        elif key == "creds":
            try:
                values["creds"] = CredentialsType(value.lower())
            except ValueError:
                raise UsageError(f"Unknown credentials type: {value}") from None
        else:
            raise UsageError(f"Unknown argument: {key}")

    if command is None:
        raise UsageError("Must specify either balance or price command")

    return ClientConfig(command=command, **values)


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"


def usage_text() -> str:
    d = _DEFAULTS
    return (
        "Usage: [balance|price] [ARGS...]\n"
        "\n"
        "balance: create channel to wallet_server and get balance.\n"
        "price: create channel to stats_server and get price.\n"
        "\n"
        f"  --wallet_server=HOST      Address of the wallet service. Default {d['wallet_server']}\n"
        f"  --stats_server=HOST       Address of the stats service. Default {d['stats_server']}\n"
        f"  --user=Alice|Bob          The user to call the RPCs. Default {d['user'].value}\n"
        "  --gcp_client_project=STR  GCP project. If set, metrics and traces will be exported.\n"
        f"                            Default \"{d['gcp_client_project']}\"\n"
        f"  --watch=true|false        Whether to call the streaming RPC. Default {_fmt_bool(d['watch'])}\n"
        "  --unary_watch=true|false  Watch for balance updates with unary RPC in loop (only applies\n"
        f"                            to balance command). Requires watch=false. Default {_fmt_bool(d['unary_watch'])}\n"
        f"  --affinity=true|false     Send requests with session affinity. Default {_fmt_bool(d['affinity'])}\n"
        f"  --creds=insecure|xds      Type of credentials to use on the client. Default {d['creds'].value}\n"
        "  --route=STR               A string value to set for the 'route' header. Optional\n"
        "  --help                    Print this message and exit.\n"
    )


def parse_args_or_exit(argv: Sequence[str]) -> ClientConfig:
    """Parse arguments; on failure print the reason and usage to stderr and exit 1."""
    try:
        return parse_args(argv)
    except UsageError as e:
        if str(e):
            print(str(e), file=sys.stderr)
        print(usage_text(), file=sys.stderr, end="")
        sys.exit(1)
