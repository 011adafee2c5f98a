# src/visitor_counter/responses.py
import json

from visitor_counter.counter import isoformat, utc_now

SUCCESS_MESSAGE = "Visitor count updated successfully"
ERROR_LABEL = "Internal server error"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Content-Type": "application/json",
}


def create_response(status_code, body):
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body),
    }


def success(count, now=None):
    return create_response(200, {
        "count": count,
        "message": SUCCESS_MESSAGE,
        "timestamp": isoformat(now or utc_now()),
    })


def error(message, now=None):
    return create_response(500, {
        "error": ERROR_LABEL,
        "message": message,
        "timestamp": isoformat(now or utc_now()),
    })
