"""Tests for timezone identifiers and resolution."""

from __future__ import annotations

import logging

import pytest

from datewise.errors import DatewiseError, UnresolvedZoneError
from datewise.units import (
    TZ,
    TZ_EUROPE_LONDON,
    TZ_UTC,
    is_time_zone_supported,
    resolve_timezone,
)


class TestTZ:
    """Tests for the TZ enumeration."""

    def test_constants(self):
        """Module constants match their enum members."""
        assert TZ_UTC == "UTC"
        assert TZ_EUROPE_LONDON == "Europe/London"
        assert TZ.EUROPE_LONDON == "Europe/London"

    def test_str(self):
        """Members render as their identifier."""
        assert str(TZ.AMERICA_NEW_YORK) == "America/New_York"

    @pytest.mark.parametrize("member", list(TZ))
    def test_every_member_resolves(self, member):
        """Every listed zone is in the timezone database."""
        assert is_time_zone_supported(member.value)


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    def test_resolve_name(self):
        """A known zone resolves to a timezone with that name."""
        assert resolve_timezone("Europe/London").name == "Europe/London"

    def test_resolve_member(self):
        """Enum members are accepted directly."""
        assert resolve_timezone(TZ.ASIA_TOKYO).name == "Asia/Tokyo"

    def test_unknown(self):
        """An unknown zone raises UnresolvedZoneError."""
        with pytest.raises(UnresolvedZoneError) as excinfo:
            resolve_timezone("Mars/Olympus_Mons")
        assert excinfo.value.name == "Mars/Olympus_Mons"
        assert "Mars/Olympus_Mons" in str(excinfo.value)

    def test_empty(self):
        """An empty name is unknown."""
        with pytest.raises(UnresolvedZoneError):
            resolve_timezone("")

    def test_is_datewise_error(self):
        """UnresolvedZoneError belongs to the Datewise hierarchy."""
        with pytest.raises(DatewiseError):
            resolve_timezone("Not/AZone")

    def test_failure_logged(self, caplog):
        """Failed lookups are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="datewise.units.timezone"):
            assert not is_time_zone_supported("Not/AZone")
        assert "Not/AZone" in caplog.text


class TestIsTimeZoneSupported:
    """Tests for is_time_zone_supported."""

    def test_supported(self):
        """Known zones are supported."""
        assert is_time_zone_supported("UTC")
        assert is_time_zone_supported("America/Halifax")

    def test_unsupported(self):
        """Unknown zones are not."""
        assert not is_time_zone_supported("Mars/Olympus_Mons")
