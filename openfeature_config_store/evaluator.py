# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Typed flag evaluation against an explicitly owned OpenFeature provider."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from openfeature.evaluation_context import EvaluationContext
from openfeature.exception import ErrorCode, OpenFeatureError

from . import flag_types
from .exceptions import FlagEvaluationError, FlagValueParseError, UnsupportedFlagTypeError
from .models import (
    ITEM_METADATA_FLAG_KEY,
    ITEM_METADATA_REASON,
    ITEM_METADATA_VARIANT,
    FlagType,
    Item,
)


@dataclass(frozen=True)
class FlagTypeHandler:
    """How one flag type is parsed, resolved and formatted.

    Attributes:
        parse: Parser for the string-encoded default
        resolver: Name of the provider's resolve method
        accepts: Whether a resolved value has the flag's type
        format: Formatter for the resolved value
    """
    parse: Callable[[str], Any]
    resolver: str
    accepts: Callable[[Any], bool]
    format: Callable[[Any], str]


FLAG_TYPE_HANDLERS: dict[FlagType, FlagTypeHandler] = {
    FlagType.BOOL: FlagTypeHandler(
        flag_types.parse_bool, "resolve_boolean_details", flag_types.is_bool, flag_types.format_bool
    ),
    FlagType.STRING: FlagTypeHandler(
        flag_types.parse_string, "resolve_string_details", flag_types.is_string, flag_types.format_string
    ),
    FlagType.INT: FlagTypeHandler(
        flag_types.parse_int, "resolve_integer_details", flag_types.is_int, flag_types.format_int
    ),
    FlagType.FLOAT: FlagTypeHandler(
        flag_types.parse_float, "resolve_float_details", flag_types.is_float, flag_types.format_float
    ),
    FlagType.OBJECT: FlagTypeHandler(
        flag_types.parse_object, "resolve_object_details", flag_types.is_object, flag_types.format_object
    ),
}


def _as_str(value: Any) -> str:
    """Render an optional enum or string field as a plain string."""
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def build_evaluation_context(attributes: Mapping[str, Any]) -> EvaluationContext:
    """Build an evaluation context from request metadata, copied verbatim."""
    return EvaluationContext(targeting_key=None, attributes=dict(attributes))


def resolve_flag_type(flag_key: str, raw_type: str) -> FlagType:
    try:
        return FlagType(raw_type)
    except ValueError as e:
        raise UnsupportedFlagTypeError(flag_key, raw_type, [t.value for t in FlagType]) from e


class FlagEvaluator:
    """Evaluates flags through a single provider owned by this instance.

    Unlike the OpenFeature global API, the provider is not registered
    process-wide, so several evaluators with different providers can coexist.
    """

    def __init__(self, provider: Any, name: str):
        """Initialize the evaluator.

        Args:
            provider: OpenFeature provider, already initialized
            name: Client name reported in component metadata
        """
        self._provider = provider
        self.name = name

    @property
    def provider(self) -> Any:
        return self._provider

    def evaluate(
        self,
        flag_type: FlagType,
        flag_key: str,
        default_value: str,
        context: EvaluationContext,
    ) -> Item:
        """Evaluate a flag of the given type and encode the result as an Item.

        The default is parsed before the provider is called, so a malformed
        default never reaches the provider.

        Args:
            flag_type: Type of the flag
            flag_key: Flag to evaluate
            default_value: String-encoded fallback value
            context: Evaluation context passed to the provider

        Returns:
            Item with the string-encoded value and evaluation metadata

        Raises:
            FlagValueParseError: If the default cannot be parsed
            FlagEvaluationError: If the provider reports an error or returns a
                value of the wrong type
        """
        handler = FLAG_TYPE_HANDLERS[flag_type]
        try:
            default = handler.parse(default_value)
        except ValueError as e:
            raise FlagValueParseError(flag_key, flag_type.value, default_value, str(e)) from e

        resolve = getattr(self._provider, handler.resolver)
        try:
            details = resolve(flag_key, default, context)
        except OpenFeatureError as e:
            raise FlagEvaluationError(
                flag_key,
                f"error evaluating flag {flag_key}: {e.error_message or e}",
                error_code=_as_str(e.error_code),
            ) from e

        if details.error_code is not None:
            raise FlagEvaluationError(
                flag_key,
                f"error evaluating flag {flag_key}: {details.error_message or _as_str(details.error_code)}",
                error_code=_as_str(details.error_code),
            )

        if not handler.accepts(details.value):
            raise FlagEvaluationError(
                flag_key,
                f"error evaluating flag {flag_key}: provider returned "
                f"{type(details.value).__name__}, expected {flag_type.value}",
                error_code=ErrorCode.TYPE_MISMATCH.value,
            )
        try:
            value = handler.format(details.value)
        except (TypeError, ValueError) as e:
            raise FlagEvaluationError(
                flag_key,
                f"error evaluating flag {flag_key}: cannot encode {flag_type.value} value: {e}",
                error_code=ErrorCode.TYPE_MISMATCH.value,
            ) from e

        return Item(
            value=value,
            metadata={
                ITEM_METADATA_FLAG_KEY: flag_key,
                ITEM_METADATA_VARIANT: _as_str(details.variant),
                ITEM_METADATA_REASON: _as_str(details.reason),
            },
        )
