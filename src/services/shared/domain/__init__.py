from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    ItemNotFoundException as ItemNotFoundException,
)
from .exception import (
    MarshalException as MarshalException,
)
from .exception import (
    StoreException as StoreException,
)
from .exception import (
    UnmarshalException as UnmarshalException,
)
from .repository import Repository as Repository
