"""Authentication injection for outgoing tool requests."""

import logging
from typing import Any, Mapping

import httpx

from utcp_bridge.utcp.substitution import substitute
from utcp_bridge.utcp.types import AuthConfig

logger = logging.getLogger(__name__)


def apply_auth(
    request: httpx.Request,
    auth: AuthConfig,
    environment: Mapping[str, Any] | None = None,
) -> None:
    """Add the credential described by auth to request, in place.

    Only the "api_key" auth type does anything. The key is resolved against
    the environment mapping (never against call parameters) and placed either
    in a header or in the query string. "none" and unknown auth types are
    no-ops so that manuals using newer auth kinds still load and run.

    Args:
        request: The outgoing request to modify
        auth: Auth configuration from the manual
        environment: Variables used to resolve ${name} in the key
    """
    if auth.auth_type != "api_key":
        if auth.auth_type != "none":
            logger.debug(f"Ignoring unsupported auth type: {auth.auth_type}")
        return

    if auth.api_key is None or not auth.var_name:
        logger.warning("api_key auth configured without api_key or var_name")
        return

    api_key = substitute(auth.api_key, environment)

    if auth.location == "header":
        request.headers[auth.var_name] = api_key
    elif auth.location == "query":
        # Only the configured key is touched; other params are preserved
        request.url = request.url.copy_set_param(auth.var_name, api_key)
    else:
        logger.warning(f"Unsupported api_key location: {auth.location}")
