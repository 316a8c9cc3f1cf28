from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import PassengerId, PassengerName


class PassengerFactory:
    """乗客エンティティのファクトリ

    - ID は呼び出し側から受け取らず、ここで採番する
    - プリミティブ型から Value Object への変換
    """

    def create(self, name: str) -> Passenger:
        """新規乗客エンティティを生成する

        Args:
            name: 乗客名

        Returns:
            Passenger: 新しい PassengerId を持つ乗客エンティティ
        """
        return Passenger(id=PassengerId.generate(), name=PassengerName(name))
