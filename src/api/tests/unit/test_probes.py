"""Unit tests for the structlog-backed domain probes."""

from unittest.mock import MagicMock

import structlog

from auth.observability import AuthFlowProbe, DefaultAuthFlowProbe
from iam.application.observability import (
    DefaultAuthenticationProbe,
    DefaultAuthorizationServiceProbe,
    DefaultGroupServiceProbe,
    DefaultUserServiceProbe,
)
from infrastructure.observability import (
    ConnectionProbe,
    DefaultConnectionProbe,
    DefaultRequestErrorProbe,
    DefaultStartupProbe,
    RequestErrorProbe,
    StartupProbe,
)
from shared_kernel.auth import DefaultJWTValidatorProbe


def _mock_logger() -> MagicMock:
    return MagicMock(spec=structlog.stdlib.BoundLogger)


class TestConnectionProbe:
    """Tests for ConnectionProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        probe = DefaultConnectionProbe()
        assert probe._logger is not None

    def test_default_probe_accepts_custom_logger(self):
        mock_logger = _mock_logger()
        probe = DefaultConnectionProbe(logger=mock_logger)
        assert probe._logger is mock_logger

    def test_engine_created_logs_url(self):
        mock_logger = _mock_logger()
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.engine_created(url="postgresql://tricore@localhost:5432/tricore")

        mock_logger.info.assert_called_once_with(
            "database_engine_created",
            url="postgresql://tricore@localhost:5432/tricore",
        )

    def test_pool_closed_logs_info(self):
        mock_logger = _mock_logger()
        probe = DefaultConnectionProbe(logger=mock_logger)

        probe.pool_closed()

        mock_logger.info.assert_called_once_with("connection_pool_closed")


class TestStartupProbe:
    def test_application_started(self):
        mock_logger = _mock_logger()
        probe = DefaultStartupProbe(logger=mock_logger)

        probe.application_started(version="1.0.0", allowed_origin="http://app.test")

        mock_logger.info.assert_called_once_with(
            "application_started",
            version="1.0.0",
            allowed_origin="http://app.test",
        )

    def test_missing_client_is_a_warning(self):
        mock_logger = _mock_logger()
        probe = DefaultStartupProbe(logger=mock_logger)

        probe.oidc_client_not_configured()

        assert mock_logger.warning.call_args.args[0] == "oidc_client_not_configured"


class TestRequestErrorProbe:
    def test_rejected_request_logs_info(self):
        mock_logger = _mock_logger()
        probe = DefaultRequestErrorProbe(logger=mock_logger)

        probe.request_rejected("/user-info", status=409, error="stale")

        mock_logger.info.assert_called_once_with(
            "request_rejected", path="/user-info", status=409, error="stale"
        )

    def test_unhandled_exception_logs_traceback(self):
        mock_logger = _mock_logger()
        probe = DefaultRequestErrorProbe(logger=mock_logger)
        error = RuntimeError("boom")

        probe.unhandled_exception("/user-info", error=error)

        mock_logger.error.assert_called_once_with(
            "unhandled_exception",
            path="/user-info",
            error_type="RuntimeError",
            exc_info=error,
        )


class TestServiceProbes:
    def test_user_ensured(self):
        mock_logger = _mock_logger()
        probe = DefaultUserServiceProbe(logger=mock_logger)

        probe.user_ensured(123456, was_created=True, was_updated=False)

        mock_logger.info.assert_called_once_with(
            "user_ensured", subject=123456, was_created=True, was_updated=False
        )

    def test_user_provision_failed_logs_error(self):
        mock_logger = _mock_logger()
        probe = DefaultUserServiceProbe(logger=mock_logger)

        probe.user_provision_failed(123456, error="conflict")

        mock_logger.error.assert_called_once_with(
            "user_provision_failed", subject=123456, error="conflict"
        )

    def test_group_level_deleted(self):
        mock_logger = _mock_logger()
        probe = DefaultGroupServiceProbe(logger=mock_logger)

        probe.level_deleted("admin", "viewer")

        mock_logger.info.assert_called_once_with(
            "group_level_deleted", group_name="admin", level_name="viewer"
        )

    def test_grant_check_is_debug(self):
        mock_logger = _mock_logger()
        probe = DefaultAuthorizationServiceProbe(logger=mock_logger)

        probe.grant_checked(123456, "admin", "superadmin", allowed=True)

        mock_logger.debug.assert_called_once_with(
            "grant_checked",
            subject=123456,
            group_name="admin",
            level_name="superadmin",
            allowed=True,
        )
        mock_logger.info.assert_not_called()

    def test_grant_denied_is_warning(self):
        mock_logger = _mock_logger()
        probe = DefaultAuthenticationProbe(logger=mock_logger)

        probe.grant_denied(123456, "admin", "superadmin")

        mock_logger.warning.assert_called_once_with(
            "grant_denied",
            subject=123456,
            group_name="admin",
            level_name="superadmin",
        )

    def test_jwks_fetch_failure_is_error(self):
        mock_logger = _mock_logger()
        probe = DefaultJWTValidatorProbe(logger=mock_logger)

        probe.jwks_fetch_failed(error="timeout")

        mock_logger.error.assert_called_once_with("jwks_fetch_failed", error="timeout")


class TestProbeProtocolCompliance:
    """Default probes expose every method of their protocol."""

    def _assert_implements(self, implementation: object, protocol: type) -> None:
        for name in dir(protocol):
            if name.startswith("_"):
                continue
            assert callable(getattr(implementation, name)), name

    def test_connection_probe(self):
        self._assert_implements(DefaultConnectionProbe(), ConnectionProbe)

    def test_startup_probe(self):
        self._assert_implements(DefaultStartupProbe(), StartupProbe)

    def test_request_error_probe(self):
        self._assert_implements(DefaultRequestErrorProbe(), RequestErrorProbe)

    def test_auth_flow_probe(self):
        self._assert_implements(DefaultAuthFlowProbe(), AuthFlowProbe)
