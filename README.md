# roombot

Tools for talking to a Roomba over its serial Open Interface: decoding
sensor packets, validating the streamed sensor frames, sending drive
commands, and turning wheel encoder counts into pose and velocity
estimates with covariance.

## What is inside

- `roombot.geometry`: robot model constants (`WHEEL_DIAMETER`,
  `AXLE_LENGTH`, `TICKS_PER_REV`, ...); `wrap_heading` brings an angle into
  [-π, π]; `saturate` clamps a pair of wheel commands to a limit, a clamped
  right command taking the sign of the left one.
- `roombot.matrix`: conversions between a 3×3 matrix and its flat
  nine-element covariance form (`matrix3_to_covar`, `covar_to_matrix3`),
  and the products J·(C·Jᵀ) used for propagating uncertainty
  (`mat_multiply_3x2_2x2_2x3`, `mat_multiply_3x3_3x3_3x3`).
- `roombot.timer`: `Timer` reports the time since it was created
  (`duration_since_start`) and the time between successive `get_dt` calls.
- `roombot.odometry`: `OdometryStamped` handles encoder roll-over in
  `wrap_encoders` and integrates pose, velocity and their covariances in
  `compute_odom`, which returns an `Odometry` message built from `Pose` and
  `Twist`; `to_message` gives the current estimate as such a message.
- `roombot.checksum`: `Checksum` keeps a running 16-bit byte sum;
  `extract_sublist` finds a header/length pair in a raw buffer, cuts out
  one frame and returns it if its low-byte sum is zero, otherwise `None`.
- `roombot.decode` and `roombot.decode_extended`: one decoder per Open
  Interface packet id, from `decode_packet_7` to `decode_packet_58`, built
  on `decode_short`, `decode_unsigned_short`, `decode_byte`, `decode_bool`,
  `decode_individual_bits` and `get_bit_at`. Bytes outside 0–255 raise
  `ValueError`.
- `roombot.packets`: whole-frame decoders `decode_sensor_packets`,
  `decode_sensor_packets_as_message` (giving a `SensorData` with
  `LightBumper` and `Stasis`), `decode_all_sensor_packets` (80 bytes),
  `decode_battery_packets` (10 bytes) and `decode_example_packets`;
  `inspect` renders a decoded reading as text.
- `roombot.commands`: `startup` (opens the first serial port, starts the
  robot and puts it in full mode), `shutdown` (stops it and closes the
  port), `drive`, `drive_direct`, and `drive_velocity`, which turns forward
  and angular velocity into saturated wheel speeds. The drive functions
  return the command bytes they wrote.
- `roombot.serial_stream`: `yield_sensor_stream` asks the robot for its
  sensor stream and yields decoded frames, skipping corrupted ones;
  `sanitize_and_read` checks and decodes a single frame.
- `roombot.service`: `RoombaService` takes in a stream of sensor readings
  with `send_sensor_stream` and hands them out again through
  `get_sensor_data`, and as odometry through `get_odometry_raw`. It is a
  context manager; `close` lets consumers finish once the buffer is empty.
- `roombot.tools`: `list_ports`, `mode_commands` and `duplex`, small
  utilities for inspecting ports and exercising a connected robot.

## Examples

Decoding two's-complement values as the robot sends them, high byte first:

```python
from roombot.decode import decode_short, decode_unsigned_short

decode_short(56, 255)          # -200
decode_unsigned_short(25, 2)   # 537
```

Checking a frame's checksum:

```python
from roombot.checksum import Checksum

checksum = Checksum()
checksum.push_slice([19, 5, 29, 2, 25, 13, 0, 163])
checksum.calculate()               # 256
checksum.calculate_low_byte_sum()  # 0
```

Clamping wheel commands and wrapping headings:

```python
from roombot.geometry import saturate, wrap_heading

saturate(600, 302, 500)    # (500, 302)
saturate(-600, -302, 500)  # (-500, -302)
wrap_heading(7.0)          # an angle between -π and π
```

Driving a connected robot:

```python
import time
from roombot.commands import startup, drive_velocity, shutdown

port = startup()                 # opens the first serial port, full mode
drive_velocity(0.15, 0.0, port)  # 0.15 m/s straight ahead
time.sleep(5)
drive_velocity(0.0, 0.0, port)
shutdown(port)
```

## Command line

To see which serial ports are available and what kind they are:

```
roombot-list-ports
```

## What it does not do

`RoombaService` works within one process: readings are passed to it as a
Python iterable and handed out as Python iterators. There is no network
server or client for streaming sensor data or odometry between machines,
and no visualization of the robot's state.