from typing import Any, TypeAlias
from collections.abc import Awaitable, Callable


# Type aliases for JSON payloads exchanged with the link service
JSONObject: TypeAlias = dict[str, Any]
JSONPayload: TypeAlias = JSONObject | list[Any]

# Injectable coroutine used to wait between retry attempts
Sleep: TypeAlias = Callable[[float], Awaitable[None]]
