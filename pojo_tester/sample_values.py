"""
Sample value registry.

Maps a value type to the canonical sample used to drive a setter/getter
round-trip. Each sample differs from its type's default/zero value, so a
setter that silently does nothing cannot pass the check.

Lookup mirrors "the parameter type is assignable from the sample type":
an exact key wins, otherwise the first registered type (in registration
order) that is a subclass of the requested type is used. A setter declared
with `object` therefore receives the text sample.

Usage:
    registry = default_registry()
    registry.register(Money, lambda: Money("12.50", "EUR"))
    registry.sample_for(str)        # "Z"
    registry.sample_for(Unknown)    # None
"""

import calendar
import inspect
import ipaddress
import string
import time
import types
import typing
import uuid
from datetime import date, datetime, time as clock_time, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from pathlib import Path, PurePath
from typing import Any, Callable, Union
from urllib.parse import ParseResult, SplitResult, urlparse, urlsplit
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


SampleProvider = Callable[[], Any]

EXAMPLE_URL = "http://www.example.com/"


def _url() -> ParseResult | None:
    try:
        return urlparse(EXAMPLE_URL)
    except ValueError:
        return None


def _split_url() -> SplitResult | None:
    try:
        return urlsplit(EXAMPLE_URL)
    except ValueError:
        return None


def _zone() -> ZoneInfo | None:
    try:
        return ZoneInfo("Europe/Paris")
    except ZoneInfoNotFoundError:
        return None  # No tz database on this host


def _erase_any(value_type: Any) -> Any:
    # Any and a missing annotation accept every value, like object
    if value_type is Any or value_type is inspect.Parameter.empty:
        return object
    return value_type


# ============================================================================
# Default samples (order matters for the assignable-type fallback)
# ============================================================================

DEFAULT_SAMPLES: dict[type, SampleProvider] = {
    # Text
    str: lambda: "Z",
    # Standard numbers (int before bool: an abstract number gets 12345)
    int: lambda: 12345,
    bool: lambda: True,
    float: lambda: 12345.6789,
    complex: lambda: complex(123.45, 6.789),
    # Characters / raw bytes
    bytes: lambda: b"a",
    bytearray: lambda: bytearray(b"a"),
    # Math types
    Decimal: lambda: Decimal("123456.789"),
    Fraction: lambda: Fraction(123456789, 1000),
    # Date-time types
    date: date.today,
    datetime: datetime.now,
    clock_time: lambda: datetime.now().time(),
    timedelta: lambda: timedelta(minutes=45),
    timezone: lambda: timezone(timedelta(hours=1)),
    ZoneInfo: _zone,
    calendar.Month: lambda: calendar.Month.AUGUST,
    calendar.Day: lambda: calendar.Day.SATURDAY,
    # Identifiers (random: equality only has to hold within one run)
    uuid.UUID: uuid.uuid4,
    # No currency or locale value type exists in the standard library;
    # register one for projects that have it
    # Text formatting
    string.Formatter: string.Formatter,
    string.Template: lambda: string.Template("$days days, $hours hours, $minutes minutes"),
    # Network types
    ParseResult: _url,
    SplitResult: _split_url,
    ipaddress.IPv4Address: lambda: ipaddress.IPv4Address("192.0.2.1"),
    ipaddress.IPv6Address: lambda: ipaddress.IPv6Address("2001:db8::1"),
    # File system paths
    Path: lambda: Path("example.txt"),
    PurePath: lambda: PurePath("example.txt"),
    # Legacy timestamps
    time.struct_time: lambda: time.gmtime(4_000_000),
}


class SampleValueRegistry:
    """
    Lookup table from value type to sample provider.

    The registry is never mutated while a check is running; register custom
    types before handing it to a tester.
    """

    def __init__(self, providers: dict[type, SampleProvider] | None = None):
        self._providers: dict[type, SampleProvider] = dict(providers or {})

    def register(self, value_type: type, provider: SampleProvider) -> None:
        """Add or replace the sample provider for a type."""
        self._providers[value_type] = provider

    def types(self) -> list[type]:
        """Registered types, in lookup order."""
        return list(self._providers)

    def __contains__(self, value_type: object) -> bool:
        return value_type in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def sample_for(self, value_type: Any) -> Any:
        """
        Return the sample value for a declared type.

        Returns None when the type is not recognised or its provider raises
        ValueError or TypeError. Optional[X] resolves to X; other unions
        resolve to their first recognised member.
        """
        for candidate in self._candidates(value_type):
            provider = self._provider_for(candidate)
            if provider is not None:
                try:
                    return provider()
                except (ValueError, TypeError):
                    return None
        return None

    def _candidates(self, value_type: Any) -> list[Any]:
        if typing.get_origin(value_type) in (Union, types.UnionType):
            members = [arg for arg in typing.get_args(value_type) if arg is not type(None)]
        else:
            members = [value_type]
        return [_erase_any(member) for member in members]

    def _provider_for(self, value_type: Any) -> SampleProvider | None:
        # Parametrised generics (list[int], dict[str, Any]) are not recognised
        if not isinstance(value_type, type) or typing.get_origin(value_type) is not None:
            return None

        provider = self._providers.get(value_type)
        if provider is not None:
            return provider

        for registered, provider in self._providers.items():
            try:
                if issubclass(registered, value_type):
                    return provider
            except TypeError:
                return None  # Non-runtime protocols refuse issubclass()
        return None


def default_registry() -> SampleValueRegistry:
    """Build a new registry holding the built-in samples."""
    return SampleValueRegistry(DEFAULT_SAMPLES)
