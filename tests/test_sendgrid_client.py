"""Tests for SendGridClient."""

import os
from unittest.mock import patch

import httpx
import pytest
import respx

import sendgrid_sdk
from sendgrid_sdk import SendGridClient
from sendgrid_sdk._internal.request.models import BasicAuth, BearerAuth
from sendgrid_sdk.resources import (
    APIKeys,
    Batches,
    GlobalStats,
    GlobalSuppressions,
    Suppressions,
    Templates,
    UnsubscribeGroups,
    Versions,
)

BASE = "https://api.example.com/"


class TestSendGridClient:
    """Tests for client construction and wiring."""

    def test_resources_share_dispatcher(self):
        """Should expose every resource wrapper on one dispatcher."""
        client = SendGridClient("SG.key")
        resources = {
            "api_keys": APIKeys,
            "unsubscribe_groups": UnsubscribeGroups,
            "suppressions": Suppressions,
            "global_suppressions": GlobalSuppressions,
            "global_stats": GlobalStats,
            "templates": Templates,
            "versions": Versions,
            "batches": Batches,
        }
        for attr, cls in resources.items():
            resource = getattr(client, attr)
            assert isinstance(resource, cls)
            assert resource._dispatcher is client.dispatcher

    def test_api_key_client(self):
        client = SendGridClient("SG.key")
        assert isinstance(client.dispatcher.auth, BearerAuth)

    def test_credentials_client(self):
        client = SendGridClient(username="user", password="pass", base_uri=BASE)
        assert isinstance(client.dispatcher.auth, BasicAuth)
        assert client.dispatcher.base_uri == BASE

    def test_version_defaults_to_package_version(self):
        assert SendGridClient("SG.key").version == sendgrid_sdk.__version__

    def test_from_env(self):
        env = {"SENDGRID_API_KEY": "SG.env", "SENDGRID_BASE_URI": BASE}
        with patch.dict(os.environ, env, clear=True):
            client = SendGridClient.from_env()
            assert client.dispatcher.auth == BearerAuth(api_key="SG.env")
            assert client.dispatcher.base_uri == BASE

    @pytest.mark.asyncio
    @respx.mock
    async def test_raw_verbs_delegate(self):
        """Should send raw verbs through the dispatcher."""
        route = respx.route(host="api.example.com").mock(return_value=httpx.Response(200))
        client = SendGridClient("SG.key", base_uri=BASE, version="2.0.0")

        await client.get("v3/user/profile")
        await client.post("v3/contactdb/lists", {"name": "list"})
        await client.patch("v3/contactdb/lists/1", {"name": "renamed"})
        await client.delete("v3/contactdb/lists/1")

        methods = [call.request.method for call in route.calls]
        assert methods == ["GET", "POST", "PATCH", "DELETE"]
        assert all(
            call.request.headers["user-agent"] == "sendgrid/2.0.0;python" for call in route.calls
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_resource_through_client(self):
        route = respx.post(f"{BASE}v3/templates").mock(
            return_value=httpx.Response(201, json={"id": "tpl-1", "name": "Welcome"})
        )
        client = SendGridClient("SG.key", base_uri=BASE)

        response = await client.templates.post("Welcome")

        assert route.called
        assert response.json()["id"] == "tpl-1"
