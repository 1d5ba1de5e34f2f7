"""In-process sensor and odometry service fed by a sensor stream."""

import logging
import queue
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from roombot.odometry import Odometry, OdometryStamped
from roombot.packets import SensorData

logger = logging.getLogger(__name__)

_POLL = 0.05  # s


@dataclass
class SensorsReceived:
    """Summary of a received sensor stream."""

    status: bool = False
    packet_count: int = 0


class RoombaService:
    """Buffer incoming sensor readings and hand them out as data or odometry.

    Readings sent through :meth:`send_sensor_stream` are shared between all
    consumers: each reading goes to exactly one of them.
    """

    def __init__(self, capacity: int = 100, interval: float = 0.02) -> None:
        self._queue: queue.Queue[SensorData] = queue.Queue(maxsize=capacity)
        self._interval = interval
        self._closed = threading.Event()
        self._odom_lock = threading.Lock()
        self.odom_raw = OdometryStamped(0, 0)

    def __enter__(self) -> "RoombaService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Stop accepting readings; consumers finish once the buffer is empty."""
        self._closed.set()

    def send_sensor_stream(self, stream: Iterable[SensorData]) -> SensorsReceived:
        """Push every reading of the stream into the buffer, blocking while it is full."""
        received = SensorsReceived()
        for data in stream:
            if self._closed.is_set():
                raise RuntimeError("service is closed")
            logger.debug("  ==> Sensors = %r", data)
            self._queue.put(data)
            received.status = True
            received.packet_count += 1
        return received

    def _receive(self) -> Iterator[SensorData]:
        while True:
            try:
                data = self._queue.get(timeout=_POLL)
            except queue.Empty:
                if self._closed.is_set():
                    return
                continue
            if self._interval > 0:
                time.sleep(self._interval)
            yield data

    def get_sensor_data(self) -> Iterator[SensorData]:
        """Yield buffered sensor readings until the service is closed and drained."""
        count = 0
        for data in self._receive():
            count += 1
            logger.debug("sending sensor data from server, count: %d", count)
            yield data

    def get_odometry_raw(self) -> Iterator[Odometry]:
        """Yield an odometry estimate for each buffered reading's encoder counts."""
        count = 0
        for data in self._receive():
            with self._odom_lock:
                message = self.odom_raw.compute_odom(
                    data.left_encoder_counts, data.right_encoder_counts
                )
            count += 1
            logger.debug("sending odometry from server, count: %d", count)
            yield message