class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class MarshalException(DomainException):
    """ドメインレコードを DynamoDB の属性表現に変換できない場合"""

    pass


class UnmarshalException(DomainException):
    """DynamoDB のアイテムをドメインレコードに復元できない場合"""

    pass


class StoreException(DomainException):
    """DynamoDB への呼び出しが失敗した場合（通信エラー、スロットリング等）"""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class ItemNotFoundException(StoreException):
    """更新対象のアイテムが存在しない場合（条件付き更新の失敗時）"""

    pass
