from services.flight.domain.entity import Flight
from services.flight.domain.read_model import FlightWithPassengers
from services.flight.domain.repository import FlightRepository
from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository
from services.shared.utils import get_logger

logger = get_logger("flight-service")


class ListFlightsService:
    """フライト一覧取得のユースケース

    各フライトの乗客IDセットを乗客テーブルへの逐次の点検索で展開する。
    フライト数 x 平均乗客数 の往復が発生するため小規模データ前提。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        passenger_repository: PassengerRepository,
    ) -> None:
        self._flight_repository = flight_repository
        self._passenger_repository = passenger_repository

    def list(self) -> list[FlightWithPassengers]:
        """乗客を展開した全フライトを取得する

        途中で1件でも取得・変換に失敗した場合は例外を送出し、部分結果は返さない。
        """
        return [
            FlightWithPassengers(flight=flight, passengers=self._expand(flight))
            for flight in self._flight_repository.find_all()
        ]

    def _expand(self, flight: Flight) -> tuple[Passenger, ...]:
        passengers: list[Passenger] = []

        for passenger_id in sorted(flight.passenger_ids, key=str):
            passenger = self._passenger_repository.find_by_id(passenger_id)
            if passenger is None:
                # 乗客削除はフライトへカスケードしないため参照切れがあり得る
                logger.warning(
                    "Skipping dangling passenger reference",
                    extra={
                        "flight_number": str(flight.number),
                        "passenger_id": str(passenger_id),
                    },
                )
                continue
            passengers.append(passenger)

        return tuple(passengers)
