"""Helpers for API Gateway proxy events (payload v2, with v1 fallbacks)."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

ALLOW_HEADERS = (
    "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
    "Content-MD5, Content-Type, Date, X-Api-Version"
)


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


def resp(status: int, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a proxy response.  A None body is sent empty."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json", **cors_headers()},
        "body": "" if body is None else json.dumps(body),
    }


def method(event: dict) -> str:
    return (
        ((event.get("requestContext") or {}).get("http") or {}).get("method")
        or event.get("httpMethod")
        or ""
    ).upper()


def get_header(event: dict, name: str) -> str:
    h = event.get("headers") or {}
    for k, v in h.items():
        if k.lower() == name.lower():
            return v
    return ""


def get_raw_body(event: dict) -> str:
    body = event.get("body") or ""
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8", errors="replace")
    return body


def client_ip(event: dict) -> str:
    """
    Caller address, in order: X-Forwarded-For header, the source IP the
    gateway saw on the socket, then "unknown".
    """
    forwarded = get_header(event, "x-forwarded-for")
    if forwarded:
        return forwarded

    ctx = event.get("requestContext") or {}
    source_ip = (ctx.get("http") or {}).get("sourceIp") or (ctx.get("identity") or {}).get("sourceIp")
    return source_ip or "unknown"
