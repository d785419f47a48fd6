"""Shared fixtures for building USGS CSV feed records."""

import pytest


# Real USGS CSV header and a real record. The quoted place contains a comma,
# which the literal comma split turns into two fields (13 and 14).
FEED_HEADER = (
    "time,latitude,longitude,depth,mag,magType,nst,gap,dmin,rms,net,id,updated,"
    "place,type,horizontalError,depthError,magError,magNst,status,locationSource,magSource"
)
SAMPLE_RECORD = (
    '2017-11-25T18:46:41.320Z,36.9003333,-121.6218333,6.12,2.63,md,51,59,0.03,0.08,'
    'nc,nc72923331,2017-11-25T19:58:02.050Z,"10km NE of Aromas, CA",earthquake,'
    '0.19,0.37,0.16,44,reviewed,nc,nc'
)


def build_record(
    time: str = "2020-01-15T10:30:00.000Z",
    latitude: str = "37.7749",
    longitude: str = "-122.4194",
    depth: str = "8.5",
    magnitude: str = "4.2",
    units: str = "ml",
    event_id: str = "nc0001",
    place: str = "10km NE of Test",
    event_type: str = "earthquake",
) -> str:
    """Build a record with the field layout the parser reads."""
    fields = [
        time, latitude, longitude, depth, magnitude, units,
        "51", "59", "0.03", "0.08", "nc", event_id,
        "2020-01-15T11:00:00.000Z", place, "region", event_type,
        "0.19", "0.37", "0.16", "44", "reviewed", "nc", "nc",
    ]
    return ",".join(fields)


@pytest.fixture
def make_record():
    """Factory fixture for CSV records."""
    return build_record


@pytest.fixture
def sample_record():
    """A real USGS CSV record."""
    return SAMPLE_RECORD


@pytest.fixture
def feed_header():
    """The USGS CSV header line."""
    return FEED_HEADER
