"""Client configuration model."""

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    BALANCE = "balance"
    PRICE = "price"


class User(str, Enum):
    ALICE = "Alice"
    BOB = "Bob"


class CredentialsType(str, Enum):
    INSECURE = "insecure"
    XDS = "xds"


@dataclass(frozen=True)
class ClientConfig:
    command: Command
    wallet_server: str = "localhost:18881"
    stats_server: str = "localhost:18882"
    user: User = User.ALICE
    gcp_client_project: str = ""  # empty = telemetry disabled
    watch: bool = False
    unary_watch: bool = False  # balance only, ignored when watch is set
    affinity: bool = False
    route: str = ""
    creds: CredentialsType = CredentialsType.INSECURE

    @property
    def target(self) -> str:
        """Address of the backend the command talks to."""
        if self.command is Command.PRICE:
            return self.stats_server
        return self.wallet_server


@dataclass(frozen=True)
class IdentityProfile:
    token: str
    membership: str

    @classmethod
    def for_user(cls, user: User) -> "IdentityProfile":
        return _PROFILES[user]


_PROFILES: dict[User, IdentityProfile] = {
    User.ALICE: IdentityProfile(token="2bd806c9", membership="premium"),
    User.BOB: IdentityProfile(token="81b637d8", membership="normal"),
}
