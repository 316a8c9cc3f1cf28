from .exceptions import DomainException as DomainException
from .exceptions import ItemNotFoundException as ItemNotFoundException
from .exceptions import MarshalException as MarshalException
from .exceptions import StoreException as StoreException
from .exceptions import UnmarshalException as UnmarshalException
