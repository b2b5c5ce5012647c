import asyncio
from typing import Awaitable, Callable


class LatestOnlyDebouncer:
    """
    디바운스 + stale 응답 차단을 위한 취소 가능한 작업 실행기

    schedule() 을 호출할 때마다 새 토큰이 발급되고, 아직 대기 중인 이전 타이머는 취소된다.
    이미 요청을 보낸 이전 작업은 끝까지 실행되지만 is_current() 가 False 이므로
    결과를 화면 상태에 반영(commit)할 수 없다.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._token = 0
        self._pending: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def token(self) -> int:
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    @property
    def has_pending(self) -> bool:
        """디바운스 타이머가 아직 돌고 있는지 여부"""
        return self._pending is not None and not self._pending.done()

    def invalidate(self) -> int:
        """
        대기 중인 타이머를 취소하고 토큰을 올려 이전 작업의 결과를 모두 무효화합니다.

        Returns:
            int: 새 토큰
        """
        self._token += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
        return self._token

    def schedule(self, work: Callable[[int], Awaitable[None]]) -> int:
        """
        delay 후 work(token) 을 실행하도록 예약합니다. 실행 중인 이벤트 루프가 필요합니다.

        Args:
            work: 토큰을 받아 실행되는 코루틴 함수

        Returns:
            int: 이 작업에 발급된 토큰
        """
        token = self.invalidate()
        task = asyncio.create_task(self._run(token, work))
        self._pending = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return token

    async def _run(
        self, token: int, work: Callable[[int], Awaitable[None]]
    ) -> None:
        await asyncio.sleep(self.delay)
        # 타이머 구간 종료, 이후로는 취소 대상이 아니다
        if self._pending is asyncio.current_task():
            self._pending = None
        if not self.is_current(token):
            return
        await work(token)

    async def wait(self) -> None:
        """진행 중인 모든 작업(타이머 + 요청)이 끝날 때까지 대기합니다."""
        while True:
            running = [task for task in self._tasks if not task.done()]
            if not running:
                return
            await asyncio.gather(*running, return_exceptions=True)

    async def aclose(self) -> None:
        """모든 작업을 취소하고 결과 반영을 막습니다."""
        self.invalidate()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
