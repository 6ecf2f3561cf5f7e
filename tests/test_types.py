import pytest

from tlsverify.tls import constants
from tlsverify.tls.types import AlertDescription, ContentType
from tlsverify.utils import ParseError


def test_from_byte_known_value():
    assert ContentType.from_byte(constants.RECORD_TYPE_HANDSHAKE) is ContentType.HANDSHAKE
    assert ContentType.from_byte(constants.RECORD_TYPE_ALERT) is ContentType.ALERT


def test_from_byte_unknown_defaults_to_application_data():
    assert ContentType.from_byte(99) is ContentType.APPLICATION_DATA


@pytest.mark.parametrize("member", list(ContentType))
def test_round_trip_every_content_type(member):
    assert ContentType.from_byte(int(member)) is member
    assert ContentType.parse(int(member)) is member


def test_parse_rejects_unknown():
    with pytest.raises(ParseError, match="Invalid ContentType value: 25"):
        ContentType.parse(25)


def test_alert_description_lookup_by_value():
    assert AlertDescription(AlertDescription.DECODE_ERROR.value) is AlertDescription.DECODE_ERROR
    with pytest.raises(ValueError):
        AlertDescription(3)