"""Outbound call metadata: identity, membership, affinity and route headers."""

from wallet_client.clients.models import ClientConfig, IdentityProfile

TOKEN_MD_KEY = "token"
MEMBERSHIP_MD_KEY = "membership"
SESSION_ID_MD_KEY = "session_id"
ROUTE_MD_KEY = "route"
HOSTNAME_MD_KEY = "hostname"

# Fixed stickiness key sent when --affinity=true
SESSION_AFFINITY_ID = "1234"


def build_outbound_metadata(config: ClientConfig) -> tuple[tuple[str, str], ...]:
    """Build the headers attached to every call of the run."""
    profile = IdentityProfile.for_user(config.user)
    headers = {
        TOKEN_MD_KEY: profile.token,
        MEMBERSHIP_MD_KEY: profile.membership,
    }
    if config.affinity:
        headers[SESSION_ID_MD_KEY] = SESSION_AFFINITY_ID
    if config.route:
        headers[ROUTE_MD_KEY] = config.route
    return tuple(headers.items())
