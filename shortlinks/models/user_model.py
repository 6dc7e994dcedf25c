from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from shortlinks.utils.helpers import parse_timestamp


@dataclass(frozen=True)
class UserModel:
    id: str
    email: str
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'UserModel':
        return cls(
            id=str(data['id']),
            email=data['email'],
            created_at=parse_timestamp(data.get('createdAt')),
        )


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful login or registration.

    The token is kept out of `repr()` so it never ends up in logs or tracebacks.
    """

    token: str = field(repr=False)
    user: UserModel

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'AuthResult':
        token = data['token']
        if not isinstance(token, str) or not token:
            raise ValueError('Authentication response carries no token.')
        return cls(token=token, user=UserModel.from_dict(data['user']))
