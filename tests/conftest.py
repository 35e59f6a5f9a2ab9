# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for the OpenFeature configuration store."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any
from unittest.mock import MagicMock

import pytest
from openfeature.evaluation_context import EvaluationContext
from openfeature.flag_evaluation import FlagResolutionDetails, Reason


class StubProvider:
    """In-memory OpenFeature provider that records every resolve call.

    Flags without a configured result resolve to the supplied default with
    reason DEFAULT.
    """

    def __init__(self) -> None:
        self.results: dict[str, FlagResolutionDetails] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, str, Any, EvaluationContext | None]] = []
        self.initialize_calls = 0
        self.shutdown_calls = 0

    def initialize(self, evaluation_context: EvaluationContext) -> None:
        self.initialize_calls += 1

    def shutdown(self) -> None:
        self.shutdown_calls += 1

    def set_result(self, flag_key: str, value: Any, variant: str | None = None, reason: Any = None) -> None:
        self.results[flag_key] = FlagResolutionDetails(value=value, variant=variant, reason=reason)

    def _resolve(self, kind: str, flag_key: str, default_value: Any, evaluation_context: EvaluationContext | None):
        self.calls.append((kind, flag_key, default_value, evaluation_context))
        if flag_key in self.errors:
            raise self.errors[flag_key]
        return self.results.get(
            flag_key, FlagResolutionDetails(value=default_value, reason=Reason.DEFAULT)
        )

    def resolve_boolean_details(self, flag_key, default_value, evaluation_context=None):
        return self._resolve("boolean", flag_key, default_value, evaluation_context)

    def resolve_string_details(self, flag_key, default_value, evaluation_context=None):
        return self._resolve("string", flag_key, default_value, evaluation_context)

    def resolve_integer_details(self, flag_key, default_value, evaluation_context=None):
        return self._resolve("integer", flag_key, default_value, evaluation_context)

    def resolve_float_details(self, flag_key, default_value, evaluation_context=None):
        return self._resolve("float", flag_key, default_value, evaluation_context)

    def resolve_object_details(self, flag_key, default_value, evaluation_context=None):
        return self._resolve("object", flag_key, default_value, evaluation_context)


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@dataclass(frozen=True)
class FlagdSdkMocks:
    """Per-test flagd SDK mocks.

    ``flagd_provider_cls`` returns the shared stub provider so that a store
    initialized with ``provider=flagd`` evaluates against it.
    """

    flagd_provider_cls: MagicMock
    provider: StubProvider


@pytest.fixture
def flagd_sdk_mocks(monkeypatch: pytest.MonkeyPatch, stub_provider: StubProvider) -> FlagdSdkMocks:
    """Replace the flagd provider package via `sys.modules`."""
    flagd_provider_cls = MagicMock(name="FlagdProvider", return_value=stub_provider)
    monkeypatch.setitem(
        sys.modules,
        "openfeature.contrib.provider.flagd",
        MagicMock(FlagdProvider=flagd_provider_cls),
    )
    return FlagdSdkMocks(flagd_provider_cls=flagd_provider_cls, provider=stub_provider)


@dataclass(frozen=True)
class GoFeatureFlagSdkMocks:
    """Per-test GO Feature Flag SDK mocks."""

    provider_cls: MagicMock
    options_cls: MagicMock
    pool_manager_cls: MagicMock
    timeout_cls: MagicMock
    provider: StubProvider


@pytest.fixture
def gofeatureflag_sdk_mocks(
    monkeypatch: pytest.MonkeyPatch, stub_provider: StubProvider
) -> GoFeatureFlagSdkMocks:
    """Replace the GO Feature Flag provider package and urllib3 via `sys.modules`."""
    provider_cls = MagicMock(name="GoFeatureFlagProvider", return_value=stub_provider)
    options_cls = MagicMock(name="GoFeatureFlagOptions")
    pool_manager_cls = MagicMock(name="PoolManager")
    timeout_cls = MagicMock(name="Timeout")

    monkeypatch.setitem(sys.modules, "gofeatureflag_python_provider", MagicMock())
    monkeypatch.setitem(
        sys.modules,
        "gofeatureflag_python_provider.options",
        MagicMock(GoFeatureFlagOptions=options_cls),
    )
    monkeypatch.setitem(
        sys.modules,
        "gofeatureflag_python_provider.provider",
        MagicMock(GoFeatureFlagProvider=provider_cls),
    )
    monkeypatch.setitem(
        sys.modules,
        "urllib3",
        MagicMock(PoolManager=pool_manager_cls, Timeout=timeout_cls),
    )

    return GoFeatureFlagSdkMocks(
        provider_cls=provider_cls,
        options_cls=options_cls,
        pool_manager_cls=pool_manager_cls,
        timeout_cls=timeout_cls,
        provider=stub_provider,
    )
