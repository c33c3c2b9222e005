"""SettlementScheduler — периодический розыгрыш LotteryWindow.

Состояния:
- IDLE: таймер не зарегистрирован
- RUNNING: активна одна asyncio-задача, которая каждые window_duration
  вызывает tick()

Переходы:
- start(): IDLE → RUNNING; из RUNNING сначала снимает прежний таймер
  (не более одного активного таймера)
- stop(): RUNNING → IDLE; в IDLE — no-op. Отменяет только будущие tick,
  уже переданную коллаборатору выплату не отменяет: задача, застигнутая
  внутри tick, доводит его до конца и завершается.

Ошибка отдельного tick логируется, цикл продолжает работу (RUNNING).

Clock и sleep инжектируются для детерминированных тестов.
"""

import asyncio
import inspect
import logging
import time
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Sequence

from mag_rewards.commands.factory import CommandFactory
from mag_rewards.core.domain.command import Command
from mag_rewards.core.domain.lottery import SettlementResult
from mag_rewards.lottery.window import LotteryWindow

logger = logging.getLogger(__name__)


Clock = Callable[[], int]
Dispatcher = Callable[[Sequence[Command]], Any]


def system_clock_ms() -> int:
    """Текущее время (UTC, миллисекунды)."""
    return int(time.time() * 1000)


class SchedulerState(str, Enum):
    """Состояние планировщика."""
    IDLE = "IDLE"
    RUNNING = "RUNNING"


class SettlementScheduler:
    """Периодический запуск LotteryWindow.settle с передачей выплат диспетчеру.

    Диспетчер — внешний коллаборатор; получает команды выплат победителям.
    Может быть синхронным или async.
    """

    def __init__(
        self,
        window: LotteryWindow,
        dispatcher: Dispatcher,
        factory: Optional[CommandFactory] = None,
        clock: Optional[Clock] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        """
        Args:
            window: окно розыгрыша (владеет планировщик, не разделяется)
            dispatcher: внешний получатель команд выплат
            factory: фабрика команд (default: CommandFactory(window.config))
            clock: источник времени в ms (default: system_clock_ms)
            sleep: async sleep в секундах (default: asyncio.sleep)
        """
        self.window = window
        self.dispatcher = dispatcher
        self.factory = factory or CommandFactory(window.config)
        self.clock = clock or system_clock_ms
        self.sleep = sleep or asyncio.sleep

        self._task: Optional[asyncio.Task] = None
        # Задачи, находящиеся внутри tick: их нельзя отменять
        self._ticking: set[asyncio.Task] = set()
        self._state = SchedulerState.IDLE

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == SchedulerState.RUNNING

    @property
    def interval_sec(self) -> float:
        return self.window.config.window_duration_ms / 1000

    def start(self) -> None:
        """Запуск таймера. Требует работающий event loop.

        Raises:
            RuntimeError: если нет работающего event loop
        """
        loop = asyncio.get_running_loop()

        if self._task is not None:
            self._disarm()

        self._task = loop.create_task(self._run())
        self._task.add_done_callback(self._on_task_done)
        self._state = SchedulerState.RUNNING
        logger.info("Settlement scheduler started: interval=%.1fs", self.interval_sec)

    def stop(self) -> None:
        """Остановка таймера. В IDLE — no-op."""
        if self._state == SchedulerState.IDLE:
            return

        self._disarm()
        self._state = SchedulerState.IDLE
        logger.info("Settlement scheduler stopped")

    async def tick(self) -> SettlementResult:
        """Один розыгрыш: settle → команды выплат → диспетчер.

        Окно осушается в settle() до передачи команд, поэтому повторный tick
        не может выплатить те же записи дважды. Ошибки диспетчера
        пробрасываются вызывающему.
        """
        result = self.window.settle(self.clock())
        if result.is_empty:
            return result

        commands = self.factory.lottery_payouts(result)
        outcome = self.dispatcher(commands)
        if inspect.isawaitable(outcome):
            await outcome
        return result

    async def _run(self) -> None:
        task = asyncio.current_task()
        while task is self._task:
            await self.sleep(self.interval_sec)
            if task is not self._task:
                break

            self._ticking.add(task)
            try:
                await self.tick()
            except Exception:
                logger.exception(
                    "Settlement tick failed, next tick in %.1fs", self.interval_sec
                )
            finally:
                self._ticking.discard(task)

    def _disarm(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # Задача внутри tick завершится сама, как только tick вернётся
        if task not in self._ticking:
            task.cancel()

    def _on_task_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error(
                "Settlement scheduler loop failed, scheduler is idle",
                exc_info=(type(error), error, error.__traceback__),
            )

        # Старая задача после перезапуска не должна сбрасывать состояние
        if task is self._task:
            self._task = None
            self._state = SchedulerState.IDLE
