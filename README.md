# enipscan

Building blocks for talking to EtherNet/IP adapters over CIP: elementary
data types, EPATH encoding, Message Router requests and responses, Forward
Open / Forward Close payloads, and the Identity and Parameter objects.

The package has no dependencies beyond the standard library.

## What is in the package

- `enipscan.types`: the `CipDataTypes`, `GeneralStatusCodes` and
  `ServiceCodes` enums; `data_type_size`, `decode_value` and `encode_value`
  for the fixed-size CIP types (little-endian); and `Reader`, a sequential
  little-endian reader with `read(fmt)`, `read_bytes(count)` and
  `remaining()`.
- `enipscan.revision`: `CipRevision`, a major/minor pair that prints as
  `"major.minor"`.
- `enipscan.cipstring`: `CipShortString` (one-byte length) and `CipString`
  (two-byte length), each with `pack()` and `unpack(reader)`.
- `enipscan.epath`: `EPath` with `pack()`, `size_in_words()` and
  `from_bytes()`, in 16-bit or 8-bit logical segments. Malformed paths
  raise `EPathError`.
- `enipscan.messages`: `MessageRouterRequest.pack()`,
  `MessageRouterResponse.from_bytes()`, `format_status()` and
  `log_general_and_additional_status()`.
- `enipscan.connection_parameters`: `ConnectionParameters`, the
  `NetworkConnectionParams` bit values, and
  `NetworkConnectionParametersBuilder` with the `RedundantOwner`,
  `ConnectionType`, `Priority` and `SizeType` enums.
- `enipscan.forward_open`: `ForwardOpenRequest`, `LargeForwardOpenRequest`,
  `ForwardOpenResponse` and `ForwardCloseRequest`.
- `enipscan.base_object`: `BaseObject` and the `RequestSender` protocol.
- `enipscan.identity_object`: `IdentityObject`.
- `enipscan.parameter_object`: `ParameterObject`.

## Encoding a request and parsing a reply

```python
from enipscan.epath import EPath
from enipscan.messages import MessageRouterRequest, MessageRouterResponse, format_status
from enipscan.types import GeneralStatusCodes, ServiceCodes

path = EPath(0x01, 1, 1)  # Identity object, instance 1, attribute 1
request = MessageRouterRequest(ServiceCodes.GET_ATTRIBUTE_SINGLE, path, b"")
payload = request.pack()

# reply_bytes: the Message Router reply received from the adapter
response = MessageRouterResponse.from_bytes(reply_bytes)
if response.general_status_code != GeneralStatusCodes.SUCCESS:
    print(format_status(response))
```

`MessageRouterResponse.from_bytes` raises `ValueError` when the reply is
shorter than four bytes or its additional status does not fit.

## Connection parameters

```python
from enipscan.connection_parameters import (
    ConnectionParameters, ConnectionType, NetworkConnectionParams,
    NetworkConnectionParametersBuilder, Priority,
)
from enipscan.forward_open import ForwardOpenRequest

ncp = (NetworkConnectionParametersBuilder()
       .set_connection_type(ConnectionType.P2P)
       .set_priority(Priority.SCHEDULED)
       .set_connection_size(32)
       .build())

params = ConnectionParameters(
    connection_path=bytes([0x20, 0x04, 0x24, 151, 0x2C, 150, 0x2C, 100]),
    o2t_network_connection_params=ncp,
    t2o_network_connection_params=ncp,
    transport_type_trigger=NetworkConnectionParams.CLASS1,
)
payload = ForwardOpenRequest(params).pack()
```

Pass `lfo=True` to the builder for the 32-bit layout, and use
`LargeForwardOpenRequest` to send it.

## CIP objects

`IdentityObject.read` and `ParameterObject.read` send their requests through
any object with `send_request(session, service, path, data)` that returns a
`MessageRouterResponse`, as described by `RequestSender`. The `session` is
passed through to it untouched.

```python
from enipscan.identity_object import IdentityObject
from enipscan.parameter_object import ParameterObject
from enipscan.types import CipDataTypes

identity = IdentityObject.read(1, session, router)
print(identity.product_name, identity.revision)

param = ParameterObject.read(1, True, session, router)
print(param.name, param.eng_value(CipDataTypes.UINT), param.units)
param.update_value(session)
```

A reply with a failing general status raises `RuntimeError` (after logging
the status); a reply too short to decode raises `ValueError`.
`IdentityObject.from_bytes` decodes a Get_Attribute_All reply that is
already at hand.

## What the package does not do

It opens no sockets. It does not register EtherNet/IP sessions, wrap
requests in encapsulation packets, open or run implicit I/O connections,
discover devices on the network, or transfer files. All of that is left to
the `RequestSender` you supply.

## Tests

The tests use pytest, declared in the `test` extra.