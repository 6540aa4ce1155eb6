# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import datetime
import logging
import sys
import typing

import trio

logger = logging.getLogger(__name__)

Renderer = collections.abc.Callable[[], str]


async def emit_forever(render: Renderer, interval: datetime.timedelta, stream: typing.Optional[typing.TextIO] = None):
    """Write one rendered line per tick to the stream, until cancelled or until something raises.

    The first line goes out immediately. Each later line follows a full interval after the previous
    one was flushed; a zero interval still checkpoints, so the loop stays cancellable.
    Errors from render() and from writing propagate to the caller unchanged.
    """
    if stream is None:
        stream = sys.stdout
    delay = interval.total_seconds()
    while True:
        line = render()
        stream.write(line + "\n")
        stream.flush()
        logger.debug("emitted %r", line)
        await trio.sleep(delay)
