# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Data models for the configuration store contract."""

from dataclasses import dataclass, field
from enum import Enum


class FlagType(str, Enum):
    """Type tag a host attaches to each requested flag via ``<key>_type``."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    OBJECT = "object"


class ProviderType(str, Enum):
    """Supported flag evaluation backends."""

    FLAGD = "flagd"
    GO_FEATURE_FLAG = "goFeatureFlag"


ITEM_METADATA_FLAG_KEY = "flagKey"
ITEM_METADATA_VARIANT = "variant"
ITEM_METADATA_REASON = "reason"


@dataclass
class Metadata:
    """Component metadata supplied by the host at initialization.

    Attributes:
        name: Component name assigned by the host
        properties: Flat string configuration entries (provider, flagdHost, ...)
    """
    name: str = ""
    properties: dict[str, str] = field(default_factory=dict)


@dataclass
class Item:
    """A single configuration value returned to the host.

    Attributes:
        value: String-encoded flag value
        version: Item version (unused by flag evaluation)
        metadata: flagKey, variant and reason of the evaluation
    """
    value: str
    version: str = ""
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class GetRequest:
    """Request for a batch of configuration keys."""
    keys: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class GetResponse:
    """Items keyed by the requested configuration key."""
    items: dict[str, Item] = field(default_factory=dict)


@dataclass
class SubscribeRequest:
    """Request for push updates on a set of keys.

    Attributes:
        keys: Keys to watch
        metadata: Request metadata
    """
    keys: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class UnsubscribeRequest:
    """Request to cancel a subscription.

    Attributes:
        id: Identifier returned by subscribe
    """
    id: str = ""
