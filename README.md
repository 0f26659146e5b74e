# egts

Building blocks for working with the EGTS telematics protocol (the
transport used by vehicle navigation terminals): the protocol checksums,
constants, a set of section and subrecord codecs, and the storage side of a
receiver – settings loading, navigation records and connectors that export
those records to MySQL, RabbitMQ and Redis.

## What is inside

- `egts.crc` – `crc8` (polynomial 0x31, initial 0xFF) for packet headers
  and `crc16` (CCITT, polynomial 0x1021, initial 0xFFFF) for frame data.
- `egts.types` – protocol constants as enums (`SubrecordType`,
  `PacketType`, `ServiceType`, `ProcessingCode`), the abstract
  `BinaryData` base with `encode()` and `length()`, and `EgtsError`,
  raised when a section cannot be decoded. `EgtsError` has a `message`
  and an optional `code` (a `ProcessingCode`).
- `egts.sr_abs_sensors` – `SrAbsAnSensData` (one analog input) and
  `SrAbsCntrData` (one counter input).
- `egts.sr_auth` – `SrAuthInfo` (NUL-terminated user name, password and
  optional server sequence) and `SrDispatcherIdentity`.
- `egts.sr_counters` – `SrCountersData`, eight optional 24-bit counters.
- `egts.pt_response` – `PtResponse`, the body of an acknowledgement.
- `egts.receiver.config` – `Settings` and `load_settings`.
- `egts.receiver.records` – `NavRecord`, `AnSensor`, `LiquidSensor`.
- `egts.receiver.connectors` – `MysqlConnector`, `RabbitmqConnector`,
  `RedisConnector` and `StorageError`.

## Checksums

```python
from egts.crc import crc8, crc16

assert crc8(b"123456789") == 0xF7
assert crc16(b"123456789") == 0x29B1
```

## Sections and subrecords

Every section is a dataclass. `decode` is a class method that builds one
from bytes, `encode` writes it back, and `length` is the size of the
encoded form.

```python
from egts.sr_abs_sensors import SrAbsCntrData

counter = SrAbsCntrData.decode(bytes([0x06, 0x75, 0x1D, 0x70]))
assert counter.counter_number == 6
assert counter.counter_value == 7347573
assert counter.encode() == bytes([0x06, 0x75, 0x1D, 0x70])
assert counter.length() == 4
```

`SrCountersData` keeps its eight presence flags and eight values in two
lists; entry `i` describes counter `i + 1`. When decoding, the value of
the second counter is stored in the first slot.

```python
from egts.sr_counters import SrCountersData

data = SrCountersData.decode(bytes([0xC0, 0x00, 0x00, 0x00, 0x03, 0x00, 0x00]))
assert data.counter_field_exists == [False] * 6 + [True, True]
assert data.counters[7] == 3
assert data.encode() == bytes([0xC0, 0x00, 0x00, 0x00, 0x03, 0x00, 0x00])
```

```python
from egts.sr_auth import SrAuthInfo

info = SrAuthInfo(user_name="user", user_password="password")
assert info.encode() == b"user\x00password\x00"
assert SrAuthInfo.decode(info.encode()) == info
```

`PtResponse` keeps whatever follows the processing result as raw bytes in
`sdr` (or `None` when nothing follows); when encoding, `sdr` may also be
any `BinaryData` section.

```python
from egts.pt_response import PtResponse

response = PtResponse.decode(bytes([0x15, 0x38, 0x00]))
assert response.response_packet_id == 14357
assert response.processing_result == 0
assert response.sdr is None
```

Truncated input raises `EgtsError`:

```python
from egts.types import EgtsError

try:
    PtResponse.decode(b"\x15")
except EgtsError as exc:
    print(exc.message)
```

## Receiver settings

```yaml
host: "127.0.0.1"
port: "5020"
conn_ttl: 10
log_level: "DEBUG"

storage:
  rabbitmq:
    host: "localhost"
    port: "5672"
    user: "user"
    password: "password"
    exchange: "receiver"
    key: "points"
  redis:
    server: "localhost:6379"
    queue: "egts"
    db: "0"
  mysql:
    uri: "user:password@tcp(localhost:3306)/receiver"
    table: "points"
```

```python
from egts.receiver.config import load_settings

settings = load_settings("receiver.yaml")
settings.listen_address()   # "127.0.0.1:5020"
settings.empty_conn_ttl()   # timedelta(seconds=10)
settings.logging_level()    # logging.DEBUG; INFO for unknown names
settings.store["redis"]     # {"server": "localhost:6379", ...}
```

Storage parameters are always read as strings.

## Records and connectors

`NavRecord.to_bytes()` returns compact UTF-8 JSON; empty sensor lists are
written as `null`.

```python
from egts.receiver.records import AnSensor, NavRecord

record = NavRecord(client=12, packet_id=1, latitude=45.0, longitude=60.344)
record.an_sensors.append(AnSensor(sensor_number=1, value=42))
payload = record.to_bytes()
```

Each connector is set up with `init(params)`, stores a record with
`save(record)` and is released with `close()`. Any failure raises
`StorageError`.

- `MysqlConnector` inserts the JSON into the `point` column of `table`,
  connecting with the `uri` given as `user:password@tcp(host:port)/dbname`.
- `RabbitmqConnector` publishes to `exchange` with routing `key`, as
  `text/plain`.
- `RedisConnector` publishes to the channel `queue`; `server`, `db` and
  `queue` are required.

```python
from egts.receiver.connectors import RedisConnector, StorageError

store = RedisConnector()
store.init(settings.store["redis"])
try:
    store.save(record)
except StorageError as exc:
    print(exc)
finally:
    store.close()
```

## What this package does not do

- It does not decode or encode whole transport packets (header, frame
  data and checksums together); only the sections listed above.
- There is no TCP receiver server and no command-line program, neither
  for receiving nor for generating packets.
- There is no repository that builds connectors from the `storage`
  section of the settings or fans a record out to several stores; create
  and call the connectors yourself.