# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for the OpenFeature configuration store."""


class ConfigurationStoreError(Exception):
    """Base exception for configuration store errors."""
    pass


class ConfigurationError(ConfigurationStoreError):
    """Raised when store or request metadata is missing or malformed."""
    pass


class ProviderConfigurationError(ConfigurationError):
    """Raised when provider metadata cannot be turned into a provider."""
    pass


class MissingFlagMetadataError(ConfigurationError):
    """Raised when a requested flag lacks its companion metadata entry."""

    def __init__(self, flag_key: str, metadata_key: str):
        super().__init__(
            f"required key {metadata_key} not found in metadata for flag {flag_key}"
        )
        self.flag_key = flag_key
        self.metadata_key = metadata_key


class FlagValueParseError(ConfigurationError):
    """Raised when a string-encoded default value cannot be parsed."""

    def __init__(self, flag_key: str, flag_type: str, raw_value: str, reason: str = ""):
        message = f"could not parse default value {raw_value!r} as {flag_type} for flag {flag_key}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.flag_key = flag_key
        self.flag_type = flag_type
        self.raw_value = raw_value


class UnsupportedFlagTypeError(ConfigurationError):
    """Raised when a flag's type tag is not a known flag type."""

    def __init__(self, flag_key: str, flag_type: str, supported: list[str]):
        super().__init__(
            f"unsupported type {flag_type!r} for flag {flag_key}. "
            f"Supported types: {', '.join(supported)}"
        )
        self.flag_key = flag_key
        self.flag_type = flag_type


class ProviderInitializationError(ConfigurationStoreError):
    """Raised when the selected provider fails to construct or initialize."""
    pass


class FlagEvaluationError(ConfigurationStoreError):
    """Raised when the provider reports an error evaluating a flag.

    Attributes:
        flag_key: Flag that failed to evaluate
        error_code: Provider error code, passed through unchanged
    """

    def __init__(self, flag_key: str, message: str, error_code: str | None = None):
        super().__init__(message)
        self.flag_key = flag_key
        self.error_code = error_code


class StoreNotInitializedError(ConfigurationStoreError):
    """Raised when the store is used before init() succeeded."""
    pass
