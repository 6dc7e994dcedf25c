from dataclasses import dataclass
from typing import Any


# fmt: off
@dataclass(frozen=True)
class AccessCheck:
    slug: str                           # Slug the check was made for
    password_required: bool             # True if the link is password protected
    password_valid: bool | None = None  # Only set when a password was submitted
    original_url: str | None = None     # Only set when access is granted
# fmt: on

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'AccessCheck':
        password_required = data['passwordRequired']
        if not isinstance(password_required, bool):
            raise TypeError(f'passwordRequired must be a boolean (given type: {type(password_required)}).')
        password_valid = data.get('passwordValid')
        return cls(
            slug=data.get('slug', ''),
            password_required=password_required,
            password_valid=None if password_valid is None else bool(password_valid),
            original_url=data.get('originalUrl') or None,
        )
