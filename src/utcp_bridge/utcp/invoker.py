"""HTTP execution of UTCP tool calls.

The ToolInvoker turns an HttpCallTemplate plus call parameters into a real
HTTP request. A response of any status is returned as a ToolCallResult;
only failures to complete the request raise.
"""

import json
import logging
import time
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from utcp_bridge.utcp.auth import apply_auth
from utcp_bridge.utcp.errors import TransportError
from utcp_bridge.utcp.substitution import find_placeholders, substitute
from utcp_bridge.utcp.types import AuthConfig, HttpCallTemplate, ToolCallResult

logger = logging.getLogger(__name__)

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class ToolInvoker:
    """Executes HTTP call templates.

    Attributes:
        environment: Variables available to every template (API keys etc.)
        _client: Shared httpx.AsyncClient used for all requests
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        environment: Mapping[str, Any] | None = None,
    ) -> None:
        self._client = http_client
        self.environment = dict(environment or {})

    def build_url(self, template: HttpCallTemplate, parameters: Mapping[str, Any]) -> str:
        """Substitute the template URL and append its query parameters.

        Query values are percent-encoded after substitution. A value whose
        placeholder could not be resolved is sent as the literal placeholder.
        """
        url = substitute(template.url, self.environment, parameters)

        if not template.query_params:
            return url

        pairs = []
        for key, value_template in template.query_params.items():
            value = substitute(value_template, self.environment, parameters)
            unresolved = find_placeholders(value)
            if unresolved:
                logger.warning(
                    f"Query parameter '{key}' has unresolved placeholders: {unresolved}"
                )
            pairs.append(f"{key}={quote(value, safe='')}")

        if pairs:
            url += ("&" if "?" in url else "?") + "&".join(pairs)
        return url

    def build_request(
        self,
        template: HttpCallTemplate,
        parameters: Mapping[str, Any],
        auth: AuthConfig | None = None,
    ) -> httpx.Request:
        """Build the fully resolved request for a call template."""
        method = template.http_method.upper()
        url = self.build_url(template, parameters)

        headers = {}
        for name, value in (template.headers or {}).items():
            headers[name] = substitute(value, self.environment, parameters)

        content = None
        if template.body is not None and method in BODY_METHODS:
            body_json = substitute(
                json.dumps(template.body), self.environment, parameters
            )
            content = body_json.encode("utf-8")
            headers["Content-Type"] = "application/json; charset=utf-8"

        request = self._client.build_request(
            method, url, headers=headers, content=content
        )

        if auth is not None:
            apply_auth(request, auth, self.environment)

        return request

    async def invoke(
        self,
        template: HttpCallTemplate,
        parameters: Mapping[str, Any],
        auth: AuthConfig | None = None,
    ) -> ToolCallResult:
        """Execute a call template and capture the response.

        Args:
            template: The HTTP call template of the tool
            parameters: Call arguments used for ${name} substitution
            auth: Optional auth config applied after headers are set

        Returns:
            ToolCallResult: success is True iff the status is 2xx

        Raises:
            TransportError: If the request could not be completed
        """
        request = self.build_request(template, parameters, auth)
        logger.info(f"{request.method} {request.url}")

        start = time.perf_counter()
        try:
            response = await self._client.send(request)
        except httpx.TransportError as e:
            logger.error(f"Tool request {request.method} {request.url} failed: {e}")
            raise TransportError(str(request.url), str(e) or type(e).__name__) from e
        duration_ms = (time.perf_counter() - start) * 1000

        body = response.text
        logger.info(
            f"Response {response.status_code} received in {duration_ms:.0f}ms"
        )

        return ToolCallResult(
            success=200 <= response.status_code <= 299,
            status_code=response.status_code,
            body=body,
            duration_ms=duration_ms,
            headers=dict(response.headers),
        )
