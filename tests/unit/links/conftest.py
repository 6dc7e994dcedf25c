from collections.abc import Callable
from datetime import datetime, UTC

import pytest

from shortlinks.models import LinkModel


@pytest.fixture
def make_link() -> Callable[..., LinkModel]:
    def _make(**overrides) -> LinkModel:
        fields = {
            'id': overrides.get('slug', 'abc123'),
            'slug': 'abc123',
            'original': 'https://example.com',
            'created_at': datetime(2024, 5, 1, tzinfo=UTC),
            'last_updated': datetime(2024, 5, 1, tzinfo=UTC),
        }
        fields.update(overrides)
        return LinkModel(**fields)

    return _make
