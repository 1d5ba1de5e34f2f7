"""Interactive helpers: list serial ports, run a mode demo, poll battery data."""

import sys
import threading
import time

import serial
import serial.tools.list_ports

from roombot.commands import FULL, START, STOP, _open_first_port
from roombot.packets import BATTERY_PACKETS_SIZE, decode_battery_packets, inspect

PLAY_SONG = 141
SENSORS = 142
BATTERY_GROUP = 3


def list_ports() -> None:
    """Print the serial ports available on this system."""
    try:
        ports = serial.tools.list_ports.comports()
    except OSError as exc:
        print(repr(exc), file=sys.stderr)
        print("Error listing serial ports", file=sys.stderr)
        return

    hits = len(ports)
    if hits == 0:
        print("No ports found")
    elif hits == 1:
        print("Found 1 port: ")
    else:
        print(f"Found {hits} ports: ")

    for port in ports:
        print(f" {port.device}")
        if port.vid is not None:
            print("    Type: USB")
            print(f"    VID:{port.vid:04x} PID:{port.pid or 0:04x}")
            print(f"     Serial Number: {port.serial_number or ''}")
            print(f"      Manufacturer: {port.manufacturer or ''}")
            print(f"           Product: {port.product or ''}")
        else:
            print("    Type: Unknown")


def mode_commands() -> None:
    """Start the robot, switch to full mode, play song 2 and stop."""
    port = _open_first_port(None)
    try:
        port.flush()
        port.write(bytes([START]))
        print("Starting")
        time.sleep(1.0)
        print("Setting mode")
        port.write(bytes([FULL]))
        time.sleep(1.0)
        port.write(bytes([PLAY_SONG, 2]))
        print("Playing song")
        time.sleep(8.0)
        port.write(bytes([STOP]))
        print("Stopping")
        time.sleep(0.5)
    finally:
        port.close()


def _request_battery_packets(port, stop: threading.Event) -> None:
    while not stop.is_set():
        port.flush()
        time.sleep(0.002)
        port.write(bytes([SENSORS, BATTERY_GROUP]))
        time.sleep(0.002)
        port.flush()
        time.sleep(0.004)


def duplex() -> None:
    """Request battery packets continuously and print each decoded reply.

    Runs until interrupted.
    """
    port = _open_first_port(None)
    port.flush()
    try:
        port.write(bytes([START]))
    except serial.SerialException as exc:
        print(f"error: {exc}", file=sys.stderr)
    print("Starting")
    time.sleep(1.0)

    stop = threading.Event()
    writer = threading.Thread(
        target=_request_battery_packets, args=(port, stop), daemon=True
    )
    writer.start()

    count = 1
    try:
        while True:
            time.sleep(0.01)
            try:
                data = port.read(BATTERY_PACKETS_SIZE)
            except serial.SerialException as exc:
                print(f"This is an error: {exc!r}", file=sys.stderr)
            else:
                count += 1
                print(f"count: {count}")
                print(f"buffer size: {len(data)} bytes")
                print(f"buffer content: {list(data)}")
                if len(data) == BATTERY_PACKETS_SIZE:
                    for key, value in decode_battery_packets(data).items():
                        print(f"{key}: {inspect(value)}")
            port.flush()
    finally:
        stop.set()
        writer.join()
        port.close()