from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId


class DeletePassengerService:
    """乗客削除のユースケース

    フライトの乗客セットはカスケード削除しない。
    """

    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def delete(self, passenger_id: PassengerId) -> bool:
        """乗客を削除する。存在しなかった場合も True を返す"""
        self._repository.delete(passenger_id)
        return True
