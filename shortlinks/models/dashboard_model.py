"""Analytics summary returned by the dashboard endpoint.

Every section is optional on the wire; missing lists decode to empty tuples
and missing single values to None.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from shortlinks.models.link_model import LinkModel
from shortlinks.utils.helpers import parse_timestamp


@dataclass(frozen=True)
class ClicksOnDate:
    date: str
    clicks: int


@dataclass(frozen=True)
class TopLink:
    id: str
    name: str
    slug: str
    clicks: int
    short_url: str


@dataclass(frozen=True)
class DeviceShare:
    device: str
    clicks: int
    percentage: float


@dataclass(frozen=True)
class PeakClickTime:
    hour: int
    clicks: int
    label: str


@dataclass(frozen=True)
class CountryClicks:
    country: str
    code: str
    clicks: int


@dataclass(frozen=True)
class ClickActivity:
    id: str
    link_id: str
    link_name: str
    timestamp: datetime | None
    country: str
    device: str


@dataclass(frozen=True)
class DashboardStats:
    unique_visitors: int
    most_popular_link: LinkModel | None
    clicks_over_time: tuple[ClicksOnDate, ...]
    top_links: tuple[TopLink, ...]
    device_breakdown: tuple[DeviceShare, ...]
    peak_click_time: PeakClickTime | None
    top_countries: tuple[CountryClicks, ...]
    recent_activity: tuple[ClickActivity, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'DashboardStats':
        popular = data.get('mostPopularLink')
        peak = data.get('peakClickTime')
        return cls(
            unique_visitors=int(data.get('uniqueVisitors') or 0),
            most_popular_link=LinkModel.from_dict(popular) if popular else None,
            clicks_over_time=tuple(
                ClicksOnDate(date=item['date'], clicks=int(item['clicks'])) for item in data.get('clicksOverTime') or ()
            ),
            top_links=tuple(
                TopLink(
                    id=str(item['id']),
                    name=item.get('name', ''),
                    slug=item['slug'],
                    clicks=int(item['clicks']),
                    short_url=item.get('shortUrl', ''),
                )
                for item in data.get('topLinks') or ()
            ),
            device_breakdown=tuple(
                DeviceShare(device=item['device'], clicks=int(item['clicks']), percentage=float(item['percentage']))
                for item in data.get('deviceBreakdown') or ()
            ),
            peak_click_time=PeakClickTime(hour=int(peak['hour']), clicks=int(peak['clicks']), label=peak['label']) if peak else None,
            top_countries=tuple(
                CountryClicks(country=item['country'], code=item.get('code', ''), clicks=int(item['clicks']))
                for item in data.get('topCountries') or ()
            ),
            recent_activity=tuple(
                ClickActivity(
                    id=str(item['id']),
                    link_id=str(item['linkId']),
                    link_name=item.get('linkName', ''),
                    timestamp=parse_timestamp(item.get('timestamp')),
                    country=item.get('country', ''),
                    device=item.get('device', ''),
                )
                for item in data.get('recentActivity') or ()
            ),
        )
