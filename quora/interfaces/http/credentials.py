# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import base64
import binascii

from flask import Request

from quora.domain.users.exceptions import MalformedCredentialsError


def parse_basic_credentials(header: str | None) -> tuple[str, str]:
    """Decode ``Basic base64(username:password)`` into its two parts.

    Only the first colon separates the pair, so passwords may contain colons
    and may be empty.
    """
    if not header:
        raise MalformedCredentialsError()

    scheme, _, encoded = header.strip().partition(" ")
    if scheme.lower() != "basic" or not encoded:
        raise MalformedCredentialsError()

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise MalformedCredentialsError() from None

    username, sep, password = decoded.partition(":")
    if not sep or not username:
        raise MalformedCredentialsError()
    return username, password


def bearer_token(req: Request) -> str | None:
    header = req.headers.get("Authorization", "").strip()
    if header[:7].lower() == "bearer ":
        header = header[7:].strip()
    return header or None


def client_ip(req: Request) -> str | None:
    ip_address = req.headers.get("X-Forwarded-For", req.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


__all__ = ["bearer_token", "client_ip", "parse_basic_credentials"]
