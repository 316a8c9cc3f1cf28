from .dynamodb_store_client import DynamoDBStoreClient as DynamoDBStoreClient
from .table import StringSetAttribute as StringSetAttribute
from .table import TableDescriptor as TableDescriptor
