# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""OpenFeature Configuration Store.

Exposes feature flags evaluated by an OpenFeature provider (flagd or
GO Feature Flag) through a generic key/value configuration store interface.

Example:
    >>> from openfeature_config_store import GetRequest, create_configuration_store
    >>> store = create_configuration_store({"provider": "flagd"})
    >>> response = store.get(GetRequest(
    ...     keys=["new-checkout"],
    ...     metadata={"new-checkout_type": "bool", "new-checkout_defaultValue": "false"},
    ... ))
"""

__version__ = "0.1.0"

from .evaluator import FlagEvaluator
from .exceptions import (
    ConfigurationError,
    ConfigurationStoreError,
    FlagEvaluationError,
    FlagValueParseError,
    MissingFlagMetadataError,
    ProviderConfigurationError,
    ProviderInitializationError,
    StoreNotInitializedError,
    UnsupportedFlagTypeError,
)
from .factory import create_configuration_store
from .models import (
    FlagType,
    GetRequest,
    GetResponse,
    Item,
    Metadata,
    ProviderType,
    SubscribeRequest,
    UnsubscribeRequest,
)
from .openfeature_store import CLIENT_NAME, OpenFeatureConfigurationStore
from .provider_config import FlagdProviderConfig, GoFeatureFlagProviderConfig
from .providers import select_provider
from .store import ConfigurationStore

__all__ = [
    "__version__",
    # Store
    "CLIENT_NAME",
    "ConfigurationStore",
    "OpenFeatureConfigurationStore",
    "create_configuration_store",
    "FlagEvaluator",
    # Providers
    "FlagdProviderConfig",
    "GoFeatureFlagProviderConfig",
    "select_provider",
    # Models
    "FlagType",
    "GetRequest",
    "GetResponse",
    "Item",
    "Metadata",
    "ProviderType",
    "SubscribeRequest",
    "UnsubscribeRequest",
    # Errors
    "ConfigurationError",
    "ConfigurationStoreError",
    "FlagEvaluationError",
    "FlagValueParseError",
    "MissingFlagMetadataError",
    "ProviderConfigurationError",
    "ProviderInitializationError",
    "StoreNotInitializedError",
    "UnsupportedFlagTypeError",
]
