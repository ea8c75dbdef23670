import logging

import pytest

from enipscan.epath import EPath
from enipscan.messages import (
    MessageRouterRequest,
    MessageRouterResponse,
    format_status,
    log_general_and_additional_status,
)
from enipscan.types import GeneralStatusCodes, ServiceCodes


def test_request_pack_8_bit_wire_bytes():
    request = MessageRouterRequest(
        ServiceCodes.GET_ATTRIBUTE_SINGLE, EPath(1, 1, 1), b"", True
    )
    assert request.pack() == bytes([0x0E, 0x03, 0x20, 0x01, 0x24, 0x01, 0x30, 0x01])


def test_request_pack_layout_16_bit():
    path = EPath(0x04, 151, 3)
    payload = bytes(range(1, 11))
    packed = MessageRouterRequest(ServiceCodes.SET_ATTRIBUTE_SINGLE, path, payload).pack()
    assert packed[0] == ServiceCodes.SET_ATTRIBUTE_SINGLE
    assert packed[1] == path.size_in_words()
    assert packed[2:2 + len(path.pack())] == path.pack()
    assert packed.endswith(payload)
    assert len(packed) == 2 + len(path.pack()) + len(payload)


def test_request_rejects_large_service_code():
    with pytest.raises(ValueError):
        MessageRouterRequest(0x100, EPath(1)).pack()


def test_response_defaults():
    response = MessageRouterResponse()
    assert response.service_code == ServiceCodes.GET_ATTRIBUTE_ALL
    assert response.general_status_code == GeneralStatusCodes.SUCCESS
    assert response.additional_status == ()
    assert response.data == b""
    assert response.additional_packet_items == []


def test_response_parses_data():
    response = MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0, 0, 0x01, 0x02]))
    assert response.service_code == 0x8E
    assert response.general_status_code == GeneralStatusCodes.SUCCESS
    assert response.additional_status == ()
    assert response.data == bytes([0x01, 0x02])


def test_response_parses_additional_status():
    response = MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0x05, 1, 0x34, 0x12]))
    assert response.general_status_code == GeneralStatusCodes.PATH_DESTINATION_UNKNOWN
    assert response.additional_status == (0x1234,)
    assert response.data == b""


def test_response_unknown_status_kept_as_int():
    response = MessageRouterResponse.from_bytes(bytes([0x81, 0, 0xFE, 0]))
    assert response.general_status_code == 0xFE


def test_response_too_short():
    with pytest.raises(ValueError, match="at least 4 bytes"):
        MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0]))


def test_response_additional_status_too_long():
    with pytest.raises(ValueError, match="Additional status has wrong size"):
        MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0x01, 2, 0x00, 0x00]))


def test_format_status():
    response = MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0x05, 1, 0x34, 0x12]))
    assert format_status(response) == (
        "Message Router error=0x5 additional statuses [0x1234]"
    )


def test_log_status_emits_error(caplog):
    response = MessageRouterResponse.from_bytes(bytes([0x8E, 0, 0x08, 0]))
    with caplog.at_level(logging.ERROR, logger="enipscan.messages"):
        log_general_and_additional_status(response)
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.ERROR
    assert caplog.records[0].getMessage() == format_status(response)