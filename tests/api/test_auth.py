"""Tests for api/auth.py — token exchange and deauthorisation."""

from unittest.mock import patch

from strava_mcp.api.activities import ActivityService
from strava_mcp.api.auth import deauthorise, exchange_token
from strava_mcp.api.registry import registry
from strava_mcp.sdk.client import StravaClient, Token


@patch("strava_mcp.api.auth.sdk_auth")
def test_exchange_token_uses_anonymous_client(mock_sdk):
    mock_sdk.exchange_token.return_value = Token(access_token="abc")

    token = exchange_token(123, "secret", "the_code", "read")

    assert token.access_token == "abc"
    client, client_id, secret, code, scope = mock_sdk.exchange_token.call_args[0]
    assert isinstance(client, StravaClient)
    assert client.token is None
    assert (client_id, secret, code, scope) == (123, "secret", "the_code", "read")


@patch("strava_mcp.api.auth.sdk_auth")
def test_deauthorise_revokes_cached_services(mock_sdk, read_token, full_token):
    service = ActivityService.instance(read_token)
    other = ActivityService.instance(full_token)

    deauthorise(read_token)

    mock_sdk.deauthorise.assert_called_once_with(service.client)
    assert ActivityService.instance(read_token) is not service
    assert ActivityService.instance(full_token) is other
    assert len(registry) > 0
