"""Unit tests for the exception hierarchy."""

import pytest

from galera_init.domain.exceptions import (
    ConfigurationError,
    ConfigWriteError,
    DescriptorDecodeError,
    DescriptorLookupError,
    FeatureDisabledError,
    GaleraInitError,
    InvalidTopologyError,
    MalformedNameError,
    NoPredecessorError,
    PollCancelledError,
    ReadinessOracleError,
    StateReadError,
    TransientOracleError,
    UnsupportedSSTMethodError,
)


@pytest.mark.tier(0)
@pytest.mark.tra("Domain.Invariant.ExceptionHierarchy")
class TestExceptionHierarchy:
    """Every failure is a GaleraInitError so the CLI maps it with one handler."""

    @pytest.mark.parametrize(
        "exc",
        [
            ConfigurationError("x"),
            FeatureDisabledError("x"),
            UnsupportedSSTMethodError("x"),
            InvalidTopologyError("x"),
            DescriptorLookupError("x"),
            DescriptorDecodeError("x"),
            MalformedNameError("x"),
            NoPredecessorError("x"),
            StateReadError("x"),
            ConfigWriteError("x"),
            ReadinessOracleError("x"),
            TransientOracleError("x"),
            PollCancelledError("signal"),
        ],
    )
    def test_all_derive_from_base(self, exc):
        assert isinstance(exc, GaleraInitError)

    def test_configuration_subclasses(self):
        assert issubclass(FeatureDisabledError, ConfigurationError)
        assert issubclass(UnsupportedSSTMethodError, ConfigurationError)
        assert issubclass(InvalidTopologyError, ConfigurationError)

    def test_transient_is_oracle_error(self):
        assert issubclass(TransientOracleError, ReadinessOracleError)

    def test_lookup_error_attributes(self):
        cause = RuntimeError("boom")
        error = DescriptorLookupError(
            "failed", name="db", namespace="prod", original_error=cause
        )

        assert error.message == "failed"
        assert error.name == "db"
        assert error.namespace == "prod"
        assert error.original_error is cause

    def test_poll_cancelled_attributes(self):
        error = PollCancelledError("deadline", attempts=4)

        assert error.reason == "deadline"
        assert error.attempts == 4
        assert "deadline" in str(error)
