import time

from sensorcloud.core.config import load_settings
from sensorcloud.core.logging import configure_logging
from sensorcloud.factory import create_device
from sensorcloud.models.data import Point, SampleRate

NANOS_PER_SECOND = 1_000_000_000


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    first = int(time.time()) * NANOS_PER_SECOND
    points = [
        Point(timestamp=first, value=1.0),
        Point(timestamp=first + NANOS_PER_SECOND, value=2.0),
        Point(timestamp=first + 2 * NANOS_PER_SECOND, value=3.5),
    ]
    with create_device(settings) as device:
        result = device.upload_data("python", "ch1", SampleRate.hertz(1), points)
    print(f"Uploaded {len(points)} points (HTTP {result.status_code}, attempts={result.attempts})")


if __name__ == "__main__":
    main()
