# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory for creating configuration stores."""

from .models import Metadata
from .openfeature_store import OpenFeatureConfigurationStore


def create_configuration_store(
    metadata: Metadata | dict[str, str] | None = None,
) -> OpenFeatureConfigurationStore:
    """Create an OpenFeature configuration store, optionally initialized.

    Args:
        metadata: Component metadata, or a plain dict of its properties.
            When given, the store is initialized before it is returned.

    Returns:
        OpenFeatureConfigurationStore instance

    Raises:
        ConfigurationStoreError: If initialization fails

    Example:
        >>> store = create_configuration_store({"provider": "flagd", "flagdPort": "8013"})
        >>> store.get_component_metadata()
        {'name': 'dapr'}
    """
    store = OpenFeatureConfigurationStore()
    if metadata is None:
        return store

    if not isinstance(metadata, Metadata):
        metadata = Metadata(properties=dict(metadata))
    store.init(metadata)
    return store
