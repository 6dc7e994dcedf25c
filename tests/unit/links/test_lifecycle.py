"""Unit tests for link status resolution in links/lifecycle.py

Test coverage includes:

1. Status precedence
   - Ensures disabled always wins, then expiry, then scheduling.
   - Ensures window boundaries are inclusive at expiry and exclusive at activation.

2. Time zones
   - Ensures naive datetimes are treated as UTC when mixed with aware ones.

3. Link helpers
   - Ensures link_status() reads the current clock when `now` is omitted.
   - Ensures count_by_status() reports every status.

4. Type enforcement
   - Ensures beartype rejects non-datetime inputs.
"""

from datetime import datetime, timedelta, timezone, UTC

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from freezegun import freeze_time

from shortlinks.links import count_by_status, link_status, resolve_status
from shortlinks.models import LinkStatus


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


# -------------------------------
# 1. Status precedence
# -------------------------------


@pytest.mark.parametrize(
    'disabled, active_from, expires_at, expected',
    [
        (False, None, None, LinkStatus.ACTIVE),
        (False, None, datetime(2024, 5, 15, tzinfo=UTC), LinkStatus.EXPIRED),
        (False, datetime(2024, 7, 1, tzinfo=UTC), None, LinkStatus.SCHEDULED),
        (False, datetime(2024, 5, 1, tzinfo=UTC), datetime(2024, 7, 1, tzinfo=UTC), LinkStatus.ACTIVE),
        (True, None, None, LinkStatus.DISABLED),
        (True, datetime(2024, 7, 1, tzinfo=UTC), None, LinkStatus.DISABLED),
        (True, None, datetime(2024, 5, 15, tzinfo=UTC), LinkStatus.DISABLED),
        # Inverted window: expiry is checked first
        (False, datetime(2024, 7, 1, tzinfo=UTC), datetime(2024, 5, 15, tzinfo=UTC), LinkStatus.EXPIRED),
    ],
)
def test_resolve_status(disabled, active_from, expires_at, expected):
    assert resolve_status(NOW, disabled, active_from, expires_at) is expected


def test_expiry_boundary_is_inclusive():
    assert resolve_status(NOW, False, None, NOW) is LinkStatus.EXPIRED
    assert resolve_status(NOW, False, None, NOW + timedelta(microseconds=1)) is LinkStatus.ACTIVE


def test_activation_boundary_is_exclusive():
    assert resolve_status(NOW, False, NOW, None) is LinkStatus.ACTIVE
    assert resolve_status(NOW, False, NOW + timedelta(microseconds=1), None) is LinkStatus.SCHEDULED


# -------------------------------
# 2. Time zones
# -------------------------------


def test_naive_and_aware_values_mix():
    naive_now = datetime(2024, 6, 1, 12, 0)
    assert resolve_status(naive_now, False, None, datetime(2024, 6, 1, 11, 59, tzinfo=UTC)) is LinkStatus.EXPIRED
    assert resolve_status(NOW, False, datetime(2024, 6, 1, 12, 1), None) is LinkStatus.SCHEDULED


def test_aware_values_in_other_zones_are_compared_as_instants():
    plus_two = timezone(timedelta(hours=2))
    # 13:00+02:00 is 11:00 UTC, already past
    assert resolve_status(NOW, False, None, datetime(2024, 6, 1, 13, 0, tzinfo=plus_two)) is LinkStatus.EXPIRED


# -------------------------------
# 3. Link helpers
# -------------------------------


@freeze_time('2024-06-01T12:00:00Z')
def test_link_status_uses_current_time(make_link):
    assert link_status(make_link(expires_at=datetime(2024, 6, 1, 11, tzinfo=UTC))) is LinkStatus.EXPIRED
    assert link_status(make_link(expires_at=datetime(2024, 6, 1, 13, tzinfo=UTC))) is LinkStatus.ACTIVE


def test_link_status_with_explicit_now(make_link):
    link = make_link(active_from=datetime(2024, 7, 1, tzinfo=UTC))
    assert link_status(link, NOW) is LinkStatus.SCHEDULED
    assert link_status(link, datetime(2024, 7, 2, tzinfo=UTC)) is LinkStatus.ACTIVE


def test_count_by_status(make_link):
    links = [
        make_link(slug='a'),
        make_link(slug='b', disabled=True),
        make_link(slug='c', expires_at=datetime(2024, 1, 1, tzinfo=UTC)),
        make_link(slug='d'),
    ]

    assert count_by_status(links, NOW) == {
        LinkStatus.ACTIVE: 2,
        LinkStatus.SCHEDULED: 0,
        LinkStatus.EXPIRED: 1,
        LinkStatus.DISABLED: 1,
    }


def test_count_by_status_empty():
    assert count_by_status([], NOW) == dict.fromkeys(LinkStatus, 0)


# -------------------------------
# 4. Type enforcement
# -------------------------------


@pytest.mark.parametrize(
    'args',
    [
        ('2024-06-01T12:00:00Z', False),
        (NOW, 'no'),
        (NOW, False, '2024-06-01', None),
    ],
)
def test_resolve_status_rejects_wrong_types(args):
    with pytest.raises(BeartypeCallHintParamViolation):
        resolve_status(*args)
