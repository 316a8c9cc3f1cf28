import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway REST API (Lambda プロキシ統合) のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str) -> dict:
    """エラーレスポンスを生成する"""
    return api_response(status_code, {"status": "error", "message": message})
