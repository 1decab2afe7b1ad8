"""
Timers on top of the running event loop.

Unlike :func:`asyncio.sleep`, which is a coroutine and does nothing until
awaited, :func:`sleep` schedules its timer immediately when called,
and returns a future to be awaited later (or never):

.. code-block:: python

    delay = sleep(10)   # the countdown starts here
    await do_something_else()
    await delay         # finishes at 10s since the call, or instantly if passed

There is no cancellation of the timer. If the future is abandoned or cancelled,
the timer fires anyway, but nothing happens then.
"""
import asyncio
import logging

from pixelforge_utils._cogs.configs import configuration
from pixelforge_utils.types import Duration

logger = logging.getLogger('pixelforge_utils.timing')


class NegativeDelayError(ValueError):
    """ Raised for the delays below zero if they are configured to be rejected. """

    def __init__(self, delay: Duration) -> None:
        super().__init__(f"The delay must be non-negative, got {delay!r}.")
        self.delay = delay

    def __reduce__(self) -> tuple[type["NegativeDelayError"], tuple[Duration]]:
        return type(self), (self.delay,)


def sleep(delay: Duration) -> "asyncio.Future[None]":
    """
    Schedule a timer for ``delay`` seconds and return a future for its firing.

    The delay is measured in seconds, not milliseconds: ``sleep(0.2)`` is 200ms,
    while ``sleep(200)`` is over 3 minutes.

    The future is resolved with ``None`` when the delay is over. The delays
    are measured by the running event loop's clock, so the function must be
    called from inside of the event loop (e.g. from a coroutine or a callback).

    Zero delays are valid: the future is resolved on the next loop iteration.
    Negative delays are treated according to the settings: either as zero
    delays (the default), or as errors (see :class:`NegativeDelayPolicy`).
    """
    settings = configuration.get_settings()
    if delay < 0:
        if settings.timing.negative_delays is configuration.NegativeDelayPolicy.REJECT:
            raise NegativeDelayError(delay)
        logger.debug(f"Sleeping for a negative delay of {delay!r}s; assuming 0s instead.")
        delay = 0

    loop = asyncio.get_running_loop()
    future: "asyncio.Future[None]" = loop.create_future()
    loop.call_later(delay, _resolve, future)
    return future


def _resolve(future: "asyncio.Future[None]") -> None:
    if not future.done():  # e.g. cancelled by the awaiter
        future.set_result(None)
