from .passenger_id import PassengerId as PassengerId
from .passenger_name import PassengerName as PassengerName
