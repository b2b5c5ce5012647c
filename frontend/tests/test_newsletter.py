import asyncio

import pytest

from frontend.api.exceptions import NetworkFailure, ServerError
from frontend.newsletter import (
    INVALID_EMAIL_MESSAGE,
    SUBSCRIBE_FAILED_MESSAGE,
    SUBSCRIBED_MESSAGE,
    SubscribeControl,
)


@pytest.fixture
def control(client):
    return SubscribeControl(client)


class TestSubscribeControl:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email", ["", "not-an-email", "a@b", "a b@c.com", "@b.com"]
    )
    async def test_invalid_email_rejected_without_request(
        self, control, client, email
    ):
        control.email = email

        assert await control.submit() is False

        assert control.status == INVALID_EMAIL_MESSAGE
        client.subscribe.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_email_posts_once(self, control, client):
        client.subscribe.return_value = None
        control.email = "a@b.com"

        assert await control.submit() is True

        client.subscribe.assert_awaited_once_with("a@b.com")
        assert control.status == SUBSCRIBED_MESSAGE
        assert control.email == ""

    @pytest.mark.asyncio
    async def test_status_while_subscribing(self, control, client):
        seen = []

        async def subscribe(email):
            seen.append(control.status)

        client.subscribe.side_effect = subscribe
        control.email = "a@b.com"

        await control.submit()

        assert seen == ["Subscribing..."]

    @pytest.mark.asyncio
    async def test_server_message_shown(self, control, client):
        client.subscribe.side_effect = ServerError(409, "Email already subscribed")
        control.email = "a@b.com"

        assert await control.submit() is False

        assert control.status == "Email already subscribed"
        assert control.email == "a@b.com"

    @pytest.mark.asyncio
    async def test_fallback_message(self, control, client):
        client.subscribe.side_effect = NetworkFailure("refused")
        control.email = "a@b.com"

        await control.submit()

        assert control.status == SUBSCRIBE_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_double_submit_sends_one_request(self, control, client):
        """요청이 끝나기 전의 재제출은 무시된다"""
        gate = asyncio.Event()

        async def subscribe(email):
            await gate.wait()

        client.subscribe.side_effect = subscribe
        control.email = "a@b.com"

        first = asyncio.create_task(control.submit())
        await asyncio.sleep(0)
        assert control.is_subscribing is True
        assert await control.submit() is False

        gate.set()
        assert await first is True
        client.subscribe.assert_awaited_once_with("a@b.com")
        assert control.is_subscribing is False
