import asyncio
import logging
from typing import Final
from urllib.parse import quote

from frontend.protocols import Clipboard

logger = logging.getLogger("frontend")

DEFAULT_SHARE_TITLE: Final[str] = "Check out this post"
COPIED_RESET_SECONDS: Final[float] = 2.0


def _encode(value: str) -> str:
    return quote(value, safe="")


class ShareButtons:
    """게시물 공유 버튼 (Facebook, Twitter, LinkedIn, 링크 복사)"""

    def __init__(
        self,
        url: str,
        clipboard: Clipboard,
        title: str = "",
        copied_reset: float = COPIED_RESET_SECONDS,
    ):
        self.url = url
        self.title = title or DEFAULT_SHARE_TITLE
        self.clipboard = clipboard
        self.copied_reset = copied_reset
        self.copied = False
        self._reset_task: asyncio.Task | None = None

    @property
    def facebook_url(self) -> str:
        return f"https://www.facebook.com/sharer/sharer.php?u={_encode(self.url)}"

    @property
    def twitter_url(self) -> str:
        return (
            f"https://twitter.com/intent/tweet?url={_encode(self.url)}"
            f"&text={_encode(self.title)}"
        )

    @property
    def linkedin_url(self) -> str:
        return (
            "https://www.linkedin.com/sharing/share-offsite/"
            f"?url={_encode(self.url)}"
        )

    async def copy_link(self) -> bool:
        """
        링크를 클립보드에 복사하고 copied 를 잠시 True 로 둡니다.

        Returns:
            bool: 복사 성공 여부
        """
        try:
            await self.clipboard.write_text(self.url)
        except Exception as e:
            logger.warning(f"Failed to copy link: {e}")
            return False

        self.copied = True
        if self._reset_task is not None and not self._reset_task.done():
            self._reset_task.cancel()
        self._reset_task = asyncio.create_task(self._reset_copied())
        return True

    async def _reset_copied(self) -> None:
        await asyncio.sleep(self.copied_reset)
        self.copied = False
