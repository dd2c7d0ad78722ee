import asyncio
import inspect

from .dependency import Probe
from .errors import ProbeTimeoutError


async def invoke_probe(
    probe: Probe,
    timeout_ms: int | None = None,
) -> bool:
    """
    Invoke a sync or async probe and coerce its result to bool.

    Exceptions raised by the probe propagate to the caller. When a
    timeout is given, an awaitable probe that does not settle in time
    raises ProbeTimeoutError.
    """
    result = probe()

    if inspect.isawaitable(result):
        if timeout_ms is None:
            result = await result

        else:
            try:
                result = await asyncio.wait_for(result, timeout=timeout_ms / 1000)

            except asyncio.TimeoutError:
                raise ProbeTimeoutError(timeout_ms) from None

    return bool(result)


def describe_error(error: BaseException) -> str:
    message = str(error)
    if message:
        return message

    return type(error).__name__
