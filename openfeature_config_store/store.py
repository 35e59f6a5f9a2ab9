# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Base configuration store interface."""

from abc import ABC, abstractmethod
from typing import Callable

from .models import GetRequest, GetResponse, Metadata, SubscribeRequest, UnsubscribeRequest

UpdateHandler = Callable[[str, dict], None]


class ConfigurationStore(ABC):
    """Abstract base class for configuration stores.

    A host initializes a store once with its component metadata and then
    reads keys from it. Stores that cannot push updates accept subscriptions
    without acting on them.
    """

    @abstractmethod
    def init(self, metadata: Metadata) -> None:
        """Initialize the store from component metadata.

        Args:
            metadata: Component metadata supplied by the host

        Raises:
            ConfigurationStoreError: If the store cannot be initialized
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, request: GetRequest) -> GetResponse:
        """Read a batch of configuration items.

        Args:
            request: Keys to read and request metadata

        Returns:
            GetResponse with one item per requested key

        Raises:
            ConfigurationStoreError: If any key cannot be read
        """
        raise NotImplementedError

    @abstractmethod
    def get_component_metadata(self) -> dict[str, str]:
        """Describe the store component."""
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, request: SubscribeRequest, handler: UpdateHandler) -> str:
        """Subscribe to updates for a set of keys.

        Returns:
            Subscription identifier
        """
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, request: UnsubscribeRequest) -> None:
        """Cancel a subscription."""
        raise NotImplementedError
