"""Expand security requirements into the headers they add to a request.

Only ``in: header`` API key schemes are representable as request headers;
query schemes and oauth2/basic flows are left out.
"""

from __future__ import annotations

import logging

from .document import SecurityScheme
from .models import AuthHeader, ParameterEntry

logger = logging.getLogger(__name__)


def requirement_names(security: list[dict[str, list[str]]]) -> list[str]:
    """Return the first scheme name of each security requirement.

    Empty requirement objects (``{}``, meaning "no auth") are dropped.
    """
    return [next(iter(requirement)) for requirement in security if requirement]


def get_auth_headers(
    security_definitions: dict[str, SecurityScheme] | None,
    security_names: list[str] | None = None,
) -> list[AuthHeader]:
    """Resolve security requirement names to header-carrying auth entries.

    When ``security_names`` is None every defined scheme is considered.
    """
    if security_definitions is None:
        return []

    if security_names is not None:
        schemes = [(name, security_definitions.get(name)) for name in security_names]
    else:
        schemes = list(security_definitions.items())

    headers: list[AuthHeader] = []
    for scheme_name, scheme in schemes:
        if scheme is None:
            logger.debug("Ignoring undefined security scheme [%s]", scheme_name)
            continue
        if scheme.location != "header" or not scheme.name:
            continue
        headers.append(AuthHeader(scheme_name=scheme_name, header_name=scheme.name))
    return headers


def auth_parameters(headers: list[AuthHeader]) -> list[ParameterEntry]:
    """Each auth header is also a required string request parameter."""
    return [ParameterEntry(name=h.header_name, required=True, type="string") for h in headers]
