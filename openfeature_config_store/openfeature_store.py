# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Configuration store backed by OpenFeature flag evaluation."""

import logging
from typing import Any

from openfeature.evaluation_context import EvaluationContext

from .evaluator import FlagEvaluator, build_evaluation_context, resolve_flag_type
from .exceptions import (
    MissingFlagMetadataError,
    ProviderInitializationError,
    StoreNotInitializedError,
)
from .models import GetRequest, GetResponse, Metadata, SubscribeRequest, UnsubscribeRequest
from .provider_config import KEY_PROVIDER
from .providers import select_provider
from .store import ConfigurationStore, UpdateHandler

logger = logging.getLogger(__name__)

CLIENT_NAME = "dapr"
KEY_TYPE_SUFFIX = "_type"
KEY_DEFAULT_VALUE_SUFFIX = "_defaultValue"


class OpenFeatureConfigurationStore(ConfigurationStore):
    """Configuration store that answers reads by evaluating feature flags.

    Each requested key is a flag. The request metadata must carry
    ``<key>_type`` (bool, string, int, float or object) and
    ``<key>_defaultValue`` for every key, and is also passed to the provider
    as evaluation context attributes.

    Example:
        >>> store = OpenFeatureConfigurationStore()
        >>> store.init(Metadata(properties={"provider": "flagd"}))
        >>> response = store.get(GetRequest(
        ...     keys=["featureX"],
        ...     metadata={"featureX_type": "bool", "featureX_defaultValue": "false"},
        ... ))
        >>> response.items["featureX"].value
        'true'
    """

    def __init__(self):
        self._evaluator: FlagEvaluator | None = None

    @property
    def evaluator(self) -> FlagEvaluator:
        if self._evaluator is None:
            raise StoreNotInitializedError("configuration store is not initialized; call init() first")
        return self._evaluator

    def init(self, metadata: Metadata) -> None:
        """Select, initialize and bind the provider named in the metadata.

        Raises:
            ProviderConfigurationError: If provider metadata is missing or invalid
            ProviderInitializationError: If the provider fails to start
        """
        provider = select_provider(metadata.properties)
        try:
            provider.initialize(EvaluationContext())
        except Exception as e:
            # Release whatever the provider opened before it failed
            shutdown: Any = getattr(provider, "shutdown", None)
            if callable(shutdown):
                try:
                    shutdown()
                except Exception as shutdown_error:
                    logger.warning(
                        "Failed to shut down provider after initialization error: %s", shutdown_error
                    )
            raise ProviderInitializationError(
                f"Failed to initialize provider {metadata.properties.get(KEY_PROVIDER)}: {e}"
            ) from e

        self.close()
        self._evaluator = FlagEvaluator(provider, CLIENT_NAME)
        logger.info(
            "Initialized OpenFeature configuration store with provider %s",
            metadata.properties.get(KEY_PROVIDER),
        )

    def get(self, request: GetRequest) -> GetResponse:
        """Evaluate every requested key as a flag.

        Raises:
            StoreNotInitializedError: If init() has not succeeded
            MissingFlagMetadataError: If a key lacks its type or default entry
            UnsupportedFlagTypeError: If a key's type is not supported
            FlagValueParseError: If a default cannot be parsed
            FlagEvaluationError: If the provider fails to evaluate a flag
        """
        evaluator = self.evaluator
        context = build_evaluation_context(request.metadata)
        response = GetResponse()

        for key in request.keys:
            type_key = f"{key}{KEY_TYPE_SUFFIX}"
            raw_type = request.metadata.get(type_key)
            if raw_type is None:
                raise MissingFlagMetadataError(key, type_key)

            default_key = f"{key}{KEY_DEFAULT_VALUE_SUFFIX}"
            default_value = request.metadata.get(default_key)
            if default_value is None:
                raise MissingFlagMetadataError(key, default_key)

            flag_type = resolve_flag_type(key, raw_type)
            response.items[key] = evaluator.evaluate(flag_type, key, default_value, context)

        logger.debug("Evaluated %d flags", len(response.items))
        return response

    def get_component_metadata(self) -> dict[str, str]:
        name = self._evaluator.name if self._evaluator is not None else CLIENT_NAME
        return {"name": name}

    def subscribe(self, request: SubscribeRequest, handler: UpdateHandler) -> str:
        # Push updates are not supported; reads are point-in-time only.
        return ""

    def unsubscribe(self, request: UnsubscribeRequest) -> None:
        return None

    def close(self) -> None:
        """Shut down the bound provider, if any."""
        evaluator = self._evaluator
        if evaluator is None:
            return
        self._evaluator = None
        shutdown: Any = getattr(evaluator.provider, "shutdown", None)
        if callable(shutdown):
            shutdown()
        logger.info("Closed OpenFeature configuration store")
