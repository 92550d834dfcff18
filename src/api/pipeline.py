"""
Request pipeline
----------------
A request is handled by running an ordered list of steps over an immutable
RequestContext. A step returns either a new context (keep going) or an
outcome (stop): View, Redirect or Fault. Outcomes are plain values; the
HTTP layer turns them into responses.
"""
from dataclasses import dataclass, field, replace
import functools
import inspect
import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Union

logger = logging.getLogger(__name__)

DEFAULT_FAULT_MESSAGE = "Something went wrong."
DEFAULT_FAULT_STATUS = 500


@dataclass(frozen=True)
class RequestContext:
    params: Mapping[str, str] = field(default_factory=dict)
    content_type: str = ""
    body: bytes = b""
    payload: Any = None
    data: Any = None

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def evolve(self, **changes) -> "RequestContext":
        return replace(self, **changes)


@dataclass(frozen=True)
class View:
    template: str
    context: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass(frozen=True)
class Redirect:
    url: str
    status_code: int = 302


@dataclass(frozen=True)
class Fault:
    """
    An HTTP status code plus a message, shown to the user by the fault handler.

    Missing or invalid values fall back to 500 / "Something went wrong.",
    so a Fault always carries something renderable.
    """
    message: str = DEFAULT_FAULT_MESSAGE
    status_code: int = DEFAULT_FAULT_STATUS

    def __post_init__(self):
        if not self.message:
            object.__setattr__(self, "message", DEFAULT_FAULT_MESSAGE)
        if not isinstance(self.status_code, int) or not 400 <= self.status_code <= 599:
            object.__setattr__(self, "status_code", DEFAULT_FAULT_STATUS)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Fault":
        """
        Only exceptions that carry an HTTP status keep their text; anything
        else is shown with the default message and logged by the caller.
        """
        status_code = getattr(exc, "status_code", None)
        if status_code is None:
            return cls()
        return cls(message=str(getattr(exc, "detail", None) or exc), status_code=status_code)


Outcome = Union[View, Redirect, Fault]
StepResult = Union[RequestContext, Outcome]
Step = Callable[[RequestContext], Union[StepResult, Awaitable[StepResult]]]


async def run_pipeline(ctx: RequestContext, *steps: Step) -> Outcome:
    """Run steps in order until one of them returns an outcome."""
    for step in steps:
        result = step(ctx)
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, RequestContext):
            ctx = result
            continue
        return result
    logger.error("Request pipeline finished without producing a response")
    return Fault()


def catch_async(operation):
    """
    Wrap an async step so that an exception escaping it becomes a Fault
    outcome instead of an unhandled error.
    """
    @functools.wraps(operation)
    async def wrapper(*args, **kwargs):
        try:
            return await operation(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {operation.__name__}: {str(e)}")
            return Fault.from_exception(e)

    return wrapper
