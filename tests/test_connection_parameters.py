import pytest

from enipscan.connection_parameters import (
    ConnectionParameters,
    ConnectionType,
    NetworkConnectionParametersBuilder,
    NetworkConnectionParams,
    Priority,
    RedundantOwner,
    SizeType,
)


def test_connection_parameters_defaults():
    params = ConnectionParameters()
    assert params.connection_path == b""
    assert params.o2t_network_connection_params == 0
    assert params.o2t_real_time_format is False
    assert params.transport_type_trigger == 0


def test_connection_parameters_accumulate_flags():
    params = ConnectionParameters()
    params.t2o_network_connection_params |= NetworkConnectionParams.P2P
    params.t2o_network_connection_params |= NetworkConnectionParams.SCHEDULED_PRIORITY
    params.t2o_network_connection_params |= 32
    builder = NetworkConnectionParametersBuilder(params.t2o_network_connection_params)
    assert builder.connection_type == ConnectionType.P2P
    assert builder.priority == Priority.SCHEDULED
    assert builder.size_type == SizeType.FIXED
    assert builder.connection_size == 32


def test_builder_chain_matches_flag_constants():
    value = (
        NetworkConnectionParametersBuilder()
        .set_connection_type(ConnectionType.P2P)
        .set_priority(Priority.SCHEDULED)
        .set_connection_size(32)
        .build()
    )
    expected = NetworkConnectionParams.P2P | NetworkConnectionParams.SCHEDULED_PRIORITY | 32
    assert value == expected


@pytest.mark.parametrize(
    "setter, value, flag",
    [
        ("set_redundant_owner", RedundantOwner.REDUNDANT, NetworkConnectionParams.REDUNDANT),
        ("set_connection_type", ConnectionType.MULTICAST, NetworkConnectionParams.MULTICAST),
        ("set_priority", Priority.URGENT, NetworkConnectionParams.URGENT),
        ("set_type", SizeType.VARIABLE, NetworkConnectionParams.VARIABLE),
    ],
)
def test_builder_fields_match_flags(setter, value, flag):
    normal = getattr(NetworkConnectionParametersBuilder(), setter)(value).build()
    large = getattr(NetworkConnectionParametersBuilder(lfo=True), setter)(value).build()
    assert normal == flag
    assert large == flag << 16


@pytest.mark.parametrize("lfo", [False, True])
def test_builder_getters_round_trip(lfo):
    builder = NetworkConnectionParametersBuilder(lfo=lfo)
    builder.set_redundant_owner(RedundantOwner.REDUNDANT)
    builder.set_connection_type(ConnectionType.P2P)
    builder.set_priority(Priority.HIGH_PRIORITY)
    builder.set_type(SizeType.VARIABLE)
    builder.set_connection_size(100)
    assert builder.redundant_owner == RedundantOwner.REDUNDANT
    assert builder.connection_type == ConnectionType.P2P
    assert builder.priority == Priority.HIGH_PRIORITY
    assert builder.size_type == SizeType.VARIABLE
    assert builder.connection_size == 100


def test_builder_empty_value_reads_defaults():
    builder = NetworkConnectionParametersBuilder()
    assert builder.build() == 0
    assert builder.redundant_owner == RedundantOwner.EXCLUSIVE
    assert builder.connection_type == ConnectionType.NULL_TYPE
    assert builder.priority == Priority.LOW_PRIORITY
    assert builder.size_type == SizeType.FIXED


def test_connection_size_is_masked():
    assert NetworkConnectionParametersBuilder().set_connection_size(0xFFFF).connection_size == 0x1FF
    large = NetworkConnectionParametersBuilder(lfo=True).set_connection_size(0xFFFF)
    assert large.connection_size == 0xFFFF
    assert large.connection_type == ConnectionType.NULL_TYPE


def test_large_layout_keeps_value_in_32_bits():
    value = (
        NetworkConnectionParametersBuilder(lfo=True)
        .set_redundant_owner(RedundantOwner.REDUNDANT)
        .set_connection_type(ConnectionType.RESERVED)
        .build()
    )
    assert 0 <= value <= 0xFFFFFFFF
    assert NetworkConnectionParametersBuilder(value, True).redundant_owner == RedundantOwner.REDUNDANT
    assert NetworkConnectionParametersBuilder(value, True).connection_type == ConnectionType.RESERVED