import asyncio
import inspect
from typing_extensions import Awaitable, Callable, Coroutine, Any, Optional

type MaybeAwaitable[T] = T | Awaitable[T]

type CompletionCallback = Callable[[Optional[BaseException]], Any]

async def maybe_await[U](v: MaybeAwaitable[U]) -> U:
    if inspect.isawaitable(v):
        return await v
    return v

async def with_callback[U](coro: Coroutine[Any, Any, U], callback: Optional[CompletionCallback]) -> Optional[U]:
    """
    Await coro, reporting its outcome to callback exactly once if one was given.

    Without a callback, errors propagate to whoever awaits the result.
    With a callback, the error is handed to the callback instead.
    """
    if callback is None:
        return await coro
    try:
        result = await coro
    except Exception as e:
        await maybe_await(callback(e))
        return None
    await maybe_await(callback(None))
    return result

# The event loop only keeps weak references to tasks, so fire-and-forget
# tasks are held here until they finish.
_pending_tasks: set[asyncio.Task] = set()

def schedule[U](coro: Coroutine[Any, Any, U], callback: Optional[CompletionCallback] = None) -> asyncio.Task:
    """
    Start coro on the running event loop and return the task.

    The caller may await the task, or drop it and rely on the callback.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        raise
    task = loop.create_task(with_callback(coro, callback))
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    return task
