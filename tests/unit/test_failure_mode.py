"""Unit tests for failure mode parsing and resolution"""

import pytest

from mfa_service.core.mfa import ConfigurationError, parse_failure_mode, resolve_failure_mode
from mfa_service.domain.models import FailureMode, MultifactorPolicy

pytestmark = pytest.mark.unit


class TestParseFailureMode:
    """Test parsing configured failure mode strings"""

    @pytest.mark.parametrize("mode", list(FailureMode))
    def test_parse_member_names(self, mode):
        assert parse_failure_mode(mode.name) is mode

    def test_surrounding_whitespace_ignored(self):
        assert parse_failure_mode("  OPEN ") is FailureMode.OPEN

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_are_unset(self, value):
        assert parse_failure_mode(value) is None

    def test_enum_passes_through(self):
        assert parse_failure_mode(FailureMode.CLOSED) is FailureMode.CLOSED

    def test_names_are_case_sensitive(self):
        with pytest.raises(ConfigurationError):
            parse_failure_mode("closed")

    def test_unknown_value_fails_loudly(self):
        with pytest.raises(ConfigurationError, match="Unknown multifactor failure mode") as exc_info:
            parse_failure_mode("SOMETIMES")

        assert exc_info.value.error_code == "MFA_CONFIGURATION_ERROR"
        assert isinstance(exc_info.value, ValueError)


class TestResolveFailureMode:
    """Test the three-layer failure mode lookup"""

    @pytest.mark.parametrize("service_mode", [FailureMode.NONE, FailureMode.CLOSED, FailureMode.OPEN, FailureMode.PHANTOM])
    @pytest.mark.parametrize("global_mode", [None, "", "NONE", "CLOSED", "OPEN", "PHANTOM"])
    def test_service_policy_overrides_global(self, service_mode, global_mode):
        policy = MultifactorPolicy(failure_mode=service_mode)

        assert resolve_failure_mode(policy, global_mode, "svc") is service_mode

    def test_service_policy_wins_over_invalid_global(self):
        """The global layer is never consulted once the service decides"""
        policy = MultifactorPolicy(failure_mode=FailureMode.OPEN)

        assert resolve_failure_mode(policy, "NOT-A-MODE") is FailureMode.OPEN

    @pytest.mark.parametrize("global_mode", ["NONE", "OPEN", "PHANTOM", "CLOSED"])
    def test_global_used_when_service_not_set(self, global_mode):
        policy = MultifactorPolicy()

        assert resolve_failure_mode(policy, global_mode) is FailureMode[global_mode]

    def test_global_accepts_enum(self):
        assert resolve_failure_mode(MultifactorPolicy(), FailureMode.OPEN) is FailureMode.OPEN

    @pytest.mark.parametrize("global_mode", [None, "", "   "])
    def test_defaults_to_closed(self, global_mode):
        assert resolve_failure_mode(MultifactorPolicy(), global_mode) is FailureMode.CLOSED

    def test_global_not_set_falls_through_to_closed(self):
        assert resolve_failure_mode(MultifactorPolicy(), "NOT_SET") is FailureMode.CLOSED

    def test_missing_policy_behaves_like_not_set(self):
        assert resolve_failure_mode(None, "OPEN") is FailureMode.OPEN
        assert resolve_failure_mode(None, None) is FailureMode.CLOSED

    def test_unparsable_global_fails_loudly(self):
        with pytest.raises(ConfigurationError):
            resolve_failure_mode(MultifactorPolicy(), "open-ish")

    def test_never_returns_not_set(self):
        for mode in FailureMode:
            policy = MultifactorPolicy(failure_mode=mode)
            for global_mode in [None, *FailureMode]:
                assert resolve_failure_mode(policy, global_mode) is not FailureMode.NOT_SET
