# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Provider selection for the OpenFeature configuration store.

Each supported backend has a small driver factory that turns typed provider
settings into an OpenFeature provider. ``select_provider`` reads the
``provider`` discriminant from component metadata and dispatches to the
matching factory.
"""

from collections.abc import Mapping
from typing import Any, Callable

from .exceptions import ProviderConfigurationError, ProviderInitializationError
from .models import ProviderType
from .provider_config import KEY_PROVIDER, FlagdProviderConfig, GoFeatureFlagProviderConfig


def create_flagd_provider(config: FlagdProviderConfig) -> Any:
    """Create a flagd provider.

    Only explicitly configured options are forwarded so that the flagd
    client falls back to its own defaults (and FLAGD_* environment variables).

    Args:
        config: flagd settings

    Returns:
        FlagdProvider instance

    Raises:
        ProviderConfigurationError: If the flagd provider package is not installed
        ProviderInitializationError: If the provider cannot be constructed
    """
    try:
        from openfeature.contrib.provider.flagd import FlagdProvider
    except ImportError as e:
        raise ProviderConfigurationError(
            "flagd provider dependencies are not installed. "
            "Install with: pip install openfeature-config-store[flagd]"
        ) from e

    options: dict[str, Any] = {}
    if config.host is not None:
        options["host"] = config.host
    if config.port is not None:
        options["port"] = config.port

    try:
        return FlagdProvider(**options)
    except Exception as e:
        raise ProviderInitializationError(f"Failed to create flagd provider: {e}") from e


def create_go_feature_flag_provider(config: GoFeatureFlagProviderConfig) -> Any:
    """Create a GO Feature Flag provider talking to a relay proxy over HTTP.

    Args:
        config: Relay proxy endpoint and timeout

    Returns:
        GoFeatureFlagProvider instance

    Raises:
        ProviderConfigurationError: If the GO Feature Flag provider package is not installed
        ProviderInitializationError: If the provider cannot be constructed
    """
    try:
        import urllib3
        from gofeatureflag_python_provider.options import GoFeatureFlagOptions
        from gofeatureflag_python_provider.provider import GoFeatureFlagProvider
    except ImportError as e:
        raise ProviderConfigurationError(
            "GO Feature Flag provider dependencies are not installed. "
            "Install with: pip install openfeature-config-store[gofeatureflag]"
        ) from e

    # A zero timeout means no timeout, as with an unconfigured HTTP client
    total = config.timeout_seconds or None
    try:
        options = GoFeatureFlagOptions(
            endpoint=config.endpoint,
            urllib3_pool_manager=urllib3.PoolManager(timeout=urllib3.Timeout(total=total)),
        )
        return GoFeatureFlagProvider(options=options)
    except Exception as e:
        raise ProviderInitializationError(
            f"Failed to create GO Feature Flag provider for {config.endpoint}: {e}"
        ) from e


_DRIVERS: dict[ProviderType, Callable[[Mapping[str, str]], Any]] = {
    ProviderType.FLAGD: lambda properties: create_flagd_provider(
        FlagdProviderConfig.from_metadata(properties)
    ),
    ProviderType.GO_FEATURE_FLAG: lambda properties: create_go_feature_flag_provider(
        GoFeatureFlagProviderConfig.from_metadata(properties)
    ),
}


def select_provider(properties: Mapping[str, str]) -> Any:
    """Create the OpenFeature provider named by the ``provider`` metadata entry.

    Args:
        properties: Flat component metadata

    Returns:
        An OpenFeature provider, not yet initialized

    Raises:
        ProviderConfigurationError: If the provider is missing, unknown or misconfigured
        ProviderInitializationError: If the provider cannot be constructed
    """
    provider = properties.get(KEY_PROVIDER)
    if provider is None:
        raise ProviderConfigurationError("no provider defined in metadata")

    try:
        provider_type = ProviderType(provider)
    except ValueError as e:
        supported = ", ".join(p.value for p in ProviderType)
        raise ProviderConfigurationError(
            f"unrecognized provider {provider}. Supported providers: {supported}"
        ) from e

    return _DRIVERS[provider_type](properties)
