import logging
import re
from typing import Final

import sentry_sdk

from frontend.api.client import NewsHubClient
from frontend.api.exceptions import NewsHubError, ServerError

logger = logging.getLogger("frontend")

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_EMAIL_MESSAGE: Final[str] = "Please enter a valid email address"
SUBSCRIBING_MESSAGE: Final[str] = "Subscribing..."
SUBSCRIBED_MESSAGE: Final[str] = "Thank you for subscribing!"
SUBSCRIBE_FAILED_MESSAGE: Final[str] = "Subscription failed. Please try again."


class SubscribeControl:
    """푸터 뉴스레터 구독 폼"""

    def __init__(self, client: NewsHubClient):
        self.client = client
        self.email = ""
        self.status = ""
        self.is_subscribing = False

    async def submit(self) -> bool:
        """
        이메일 형식을 먼저 검사하고, 통과한 경우에만 구독 요청을 보냅니다.
        요청이 진행 중이면 다시 보내지 않습니다.

        Returns:
            bool: 구독 성공 여부
        """
        if self.is_subscribing:
            return False
        if not self.email or not EMAIL_PATTERN.match(self.email):
            self.status = INVALID_EMAIL_MESSAGE
            return False

        self.status = SUBSCRIBING_MESSAGE
        self.is_subscribing = True
        try:
            await self.client.subscribe(self.email)
        except ServerError as e:
            logger.warning(f"Subscription rejected: {e}")
            self.status = e.message or SUBSCRIBE_FAILED_MESSAGE
            return False
        except NewsHubError as e:
            logger.error(f"Error subscribing: {e}")
            sentry_sdk.capture_exception(e)
            self.status = SUBSCRIBE_FAILED_MESSAGE
            return False
        finally:
            self.is_subscribing = False

        self.status = SUBSCRIBED_MESSAGE
        self.email = ""
        return True
