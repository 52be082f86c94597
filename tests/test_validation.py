"""Tests for resource-existence validators."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from hcptf.exceptions import ResourceNotFoundError
from hcptf.router.validation import (
    APIResourceValidator,
    NullValidator,
    ResourceValidator,
)

SESSION = "hcptf.router.validation.APIResourceValidator._get_session"


def _ok_response():
    resp = MagicMock()
    resp.raise_for_status = MagicMock()
    return resp


def _error_response(status: int):
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Client Error")
    return resp


class TestNullValidator:
    """The default validator accepts everything."""

    def test_accepts(self):
        validator = NullValidator()
        assert validator.organization_exists("acme") is None
        assert validator.workspace_exists("acme", "prod", timeout=1) is None

    def test_satisfies_protocol(self):
        assert isinstance(NullValidator(), ResourceValidator)
        assert isinstance(APIResourceValidator(), ResourceValidator)


class TestAPIResourceValidator:
    """REST-backed validation with a mocked session."""

    def test_organization_exists(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _ok_response()

            validator = APIResourceValidator("https://tfe.example.com/", token="t")
            validator.organization_exists("acme")

            mock_session.return_value.get.assert_called_once_with(
                "https://tfe.example.com/api/v2/organizations/acme", timeout=30.0
            )

    def test_workspace_exists(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _ok_response()

            validator = APIResourceValidator("https://tfe.example.com", timeout=10)
            validator.workspace_exists("acme", "prod", timeout=2.5)

            mock_session.return_value.get.assert_called_once_with(
                "https://tfe.example.com/api/v2/organizations/acme/workspaces/prod",
                timeout=2.5,
            )

    def test_names_are_quoted(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _ok_response()

            APIResourceValidator("https://tfe.example.com").workspace_exists("acme", "a/b")

            url = mock_session.return_value.get.call_args[0][0]
            assert url.endswith("/workspaces/a%2Fb")

    def test_organization_not_found(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _error_response(404)

            validator = APIResourceValidator()
            with pytest.raises(ResourceNotFoundError) as exc_info:
                validator.organization_exists("acme")

            err = exc_info.value
            assert err.resource == "organization"
            assert err.name == "acme"
            assert err.message == 'organization "acme" not found'
            assert isinstance(err.__cause__, requests.HTTPError)
            assert "cause" in err.context

    def test_workspace_not_found(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _error_response(404)

            with pytest.raises(ResourceNotFoundError) as exc_info:
                APIResourceValidator().workspace_exists("acme", "prod")

            assert exc_info.value.message == 'workspace "prod" not found in organization "acme"'
            assert exc_info.value.organization == "acme"

    def test_connection_error_is_not_found(self):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.side_effect = requests.ConnectionError("refused")

            with pytest.raises(ResourceNotFoundError):
                APIResourceValidator().organization_exists("acme")

    def test_failure_logged(self, caplog):
        with patch(SESSION) as mock_session:
            mock_session.return_value.get.return_value = _error_response(404)

            with caplog.at_level("WARNING", logger="hcptf.router.validation"):
                with pytest.raises(ResourceNotFoundError):
                    APIResourceValidator().organization_exists("acme")

            assert "acme" in caplog.text


class TestAPIResourceValidatorSession:
    """Session lifecycle."""

    def test_headers(self):
        validator = APIResourceValidator(token="secret")
        headers = validator._get_default_headers()
        assert headers["Authorization"] == "Bearer secret"
        assert headers["Content-Type"] == "application/vnd.api+json"

    def test_no_token_no_auth_header(self):
        assert "Authorization" not in APIResourceValidator()._get_default_headers()

    def test_default_address_matches_config(self):
        from hcptf.config import ApiConfig

        assert APIResourceValidator().address == ApiConfig().address

    def test_session_created_lazily(self):
        validator = APIResourceValidator(token="secret")
        assert validator._session is None

        session = validator._get_session()
        assert session is validator._get_session()
        assert session.headers["Authorization"] == "Bearer secret"

        validator.close()
        assert validator._session is None

    def test_context_manager_closes(self):
        with APIResourceValidator() as validator:
            validator._session = MagicMock()
            session = validator._session
        session.close.assert_called_once()
        assert validator._session is None
