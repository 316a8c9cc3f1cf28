from dataclasses import dataclass

from services.flight.domain.entity import Flight
from services.passenger.domain.entity import Passenger


@dataclass(frozen=True)
class FlightWithPassengers:
    """乗客IDセットを乗客レコードに展開したフライト（永続化しない読み取りモデル）"""

    flight: Flight
    passengers: tuple[Passenger, ...] = ()
