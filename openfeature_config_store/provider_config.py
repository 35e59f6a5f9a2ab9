# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Typed provider settings parsed from flat component metadata."""

from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ProviderConfigurationError

KEY_PROVIDER = "provider"
KEY_FLAGD_HOST = "flagdHost"
KEY_FLAGD_PORT = "flagdPort"
KEY_GO_FEATURE_FLAG_ENDPOINT = "goFeatureFlagEndpoint"
KEY_GO_FEATURE_FLAG_TIMEOUT = "goFeatureFlagTimeout"

DEFAULT_GO_FEATURE_FLAG_TIMEOUT_SECONDS = 1
MAX_PORT = 65535


def _parse_non_negative_int(key: str, raw: str, upper: int | None = None) -> int:
    """Parse a decimal metadata value, rejecting signs, blanks and overflow."""
    if not raw.isdigit() or not raw.isascii():
        raise ProviderConfigurationError(f"could not parse metadata value {key}, {raw}")
    value = int(raw)
    if upper is not None and value > upper:
        raise ProviderConfigurationError(f"could not parse metadata value {key}, {raw}")
    return value


@dataclass(frozen=True)
class FlagdProviderConfig:
    """Settings for the flagd provider.

    Attributes:
        host: flagd host, or None to use the client default
        port: flagd port, or None to use the client default
    """
    host: str | None = None
    port: int | None = None

    @classmethod
    def from_metadata(cls, properties: Mapping[str, str]) -> "FlagdProviderConfig":
        port = properties.get(KEY_FLAGD_PORT)
        return cls(
            host=properties.get(KEY_FLAGD_HOST),
            port=_parse_non_negative_int(KEY_FLAGD_PORT, port, MAX_PORT) if port is not None else None,
        )


@dataclass(frozen=True)
class GoFeatureFlagProviderConfig:
    """Settings for the GO Feature Flag relay proxy provider.

    Attributes:
        endpoint: Relay proxy base URL
        timeout_seconds: HTTP timeout applied to every evaluation request
    """
    endpoint: str
    timeout_seconds: int = DEFAULT_GO_FEATURE_FLAG_TIMEOUT_SECONDS

    @classmethod
    def from_metadata(cls, properties: Mapping[str, str]) -> "GoFeatureFlagProviderConfig":
        endpoint = properties.get(KEY_GO_FEATURE_FLAG_ENDPOINT)
        if endpoint is None:
            raise ProviderConfigurationError(
                f"missing required metadata value {KEY_GO_FEATURE_FLAG_ENDPOINT}"
            )

        timeout = properties.get(KEY_GO_FEATURE_FLAG_TIMEOUT)
        if timeout is None:
            return cls(endpoint=endpoint)
        return cls(
            endpoint=endpoint,
            timeout_seconds=_parse_non_negative_int(KEY_GO_FEATURE_FLAG_TIMEOUT, timeout),
        )
