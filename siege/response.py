"""Parsing of HTTP response headers into a queryable response object."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Iterator

from siege.perl import trim
from siege.util import lowercase, stristr, strmatch

__all__ = [
    "HttpConnection",
    "TransferEncoding",
    "ContentEncoding",
    "AuthType",
    "Response",
]

ACCEPT_RANGES = "accept-ranges"
CACHE_CONTROL = "cache-control"
CHARSET = "charset"
CONNECTION = "connection"
CONTENT_DISPOSITION = "content-disposition"
CONTENT_ENCODING = "content-encoding"
CONTENT_LENGTH = "content-length"
CONTENT_TYPE = "content-type"
CONTENT_LOCATION = "content-location"
ETAG = "etag"
EXPIRES = "expires"
KEEPALIVE_MAX = "keepalive-max"
KEEPALIVE_TIMEOUT = "keepalive-timeout"
LAST_MODIFIED = "last-modified"
LOCATION = "location"
PRAGMA = "pragma"
PROTOCOL = "protocol"
PROXY_AUTHENTICATE = "proxy-authenticate"
PROXY_CONNECTION = "proxy-connection"
REFRESH = "refresh"
REDIRECT = "redirect"
RESPONSE_CODE = "response-code"
SET_COOKIE = "set-cookie"
TRANSFER_ENCODING = "transfer-encoding"
WWW_AUTHENTICATE = "www-authenticate"

DEFAULT_PROTOCOL = "HTTP/1.1"
DEFAULT_CHARSET = "iso-8859-1"
UNKNOWN_CODE = 418  # I'm a teapot (RFC 2324)

# the characters isspace() accepts in the C locale
_WS = " \t\n\v\f\r"
_SEPARATORS = "="
_QUOTES = "\"'"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class HttpConnection(IntEnum):
    """Connection header directive."""

    CLOSE = 1
    KEEPALIVE = 2
    METER = 4


class TransferEncoding(IntEnum):
    """Transfer-Encoding of the body."""

    NONE = 1
    CHUNKED = 2
    TRAILER = 4


class ContentEncoding(IntEnum):
    """Content-Encoding of the body."""

    COMPRESS = 1
    DEFLATE = 2
    GZIP = 4
    BZIP2 = 8


class AuthType(Enum):
    """Authentication scheme requested by a server or proxy."""

    BASIC = "basic"
    DIGEST = "digest"
    NTLM = "ntlm"


def _atoi(text: str | None) -> int:
    """Leading integer of the text, 0 if there is none."""
    if text is None:
        return 0
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _has_prefix(line: str, name: str) -> bool:
    """Case-insensitive (ASCII) test that the line starts with the name."""
    head = line[:len(name)]
    return len(head) == len(name) and lowercase(head, len(head)) == name


def _dequote(text: str) -> str:
    return text.strip(_QUOTES)


def _pairs(text: str) -> Iterator[str]:
    """Yield the ``option=value`` pairs of a header line.

    Each step skips to the first space, then takes everything up to the
    next ';' or ','. Iteration stops at the first piece without '='.
    """
    rest = text
    while True:
        space = rest.find(" ")
        if space < 0:
            return
        rest = rest[space + 1:]
        if not rest:
            return
        end = next((i for i, ch in enumerate(rest) if ch in ";,"), len(rest))
        pair = rest[:end]
        if "=" not in pair:
            return
        yield pair
        if end >= len(rest):
            return
        rest = rest[end + 1:]


def _split_pair(pair: str) -> tuple[str, str]:
    """Split a pair into its option name and its value."""
    i = 0
    while i < len(pair) and pair[i] not in _WS and pair[i] not in _SEPARATORS:
        i += 1
    option = pair[:i]
    i += 1
    while i < len(pair) and (pair[i] in _WS or pair[i] in _SEPARATORS):
        i += 1
    return option, pair[i:]


class Response:
    """Headers of an HTTP response, filled in one header line at a time.

    The ``set_*`` methods take a whole header line such as
    ``Content-Length: 42`` and return whether it was accepted.
    """

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.cached = False
        self.www_auth_type: AuthType | None = None
        self.www_auth_challenge: str | None = None
        self.www_auth_realm: str | None = None
        self.proxy_auth_type: AuthType | None = None
        self.proxy_auth_challenge: str | None = None
        self.proxy_auth_realm: str | None = None

    def _int_value(self, key: str, default: int) -> int:
        num = _atoi(self.headers[key]) if key in self.headers else -1
        return num if num > 0 else default

    def _bool_value(self, key: str, default: bool) -> bool:
        value = self.headers.get(key)
        if value is None:
            return default
        if strmatch(value, "true"):
            return True
        if strmatch(value, "false"):
            return False
        return default

    def set_code(self, line: str) -> bool:
        """Take the status line, e.g. ``HTTP/1.1 200 OK``."""
        if _has_prefix(line, "http") and _atoi(line[9:]) > 1:
            self.headers[PROTOCOL] = line[:8]
            self.headers[RESPONSE_CODE] = line[9:]
            return True
        return False

    def code(self) -> int:
        """Status code; 418 when no status line was seen."""
        if RESPONSE_CODE not in self.headers:
            return UNKNOWN_CODE
        return _atoi(self.headers[RESPONSE_CODE])

    def protocol(self) -> str:
        """Protocol named in the status line, HTTP/1.1 by default."""
        return self.headers.get(PROTOCOL, DEFAULT_PROTOCOL)

    def success(self) -> bool:
        """True below 400, and for 401 and 407 which call for credentials."""
        if RESPONSE_CODE not in self.headers:
            return False
        code = _atoi(self.headers[RESPONSE_CODE])
        return code < 400 or code in (401, 407)

    def failure(self) -> bool:
        """True from 400 on, except 401 and 407; True without a status line."""
        if RESPONSE_CODE not in self.headers:
            return True
        code = _atoi(self.headers[RESPONSE_CODE])
        return code >= 400 and code not in (401, 407)

    def set_content_type(self, line: str) -> bool:
        """Take a Content-Type line, with an optional charset parameter."""
        value = line[len(CONTENT_TYPE) + 2:]
        if ";" not in line:
            self.headers[CONTENT_TYPE] = value
            return True
        accepted = False
        stripped = value.lstrip(";")
        rest = ""
        if stripped:
            end = stripped.find(";")
            if end < 0:
                kind = stripped
            else:
                kind, rest = stripped[:end], stripped[end + 1:]
            self.headers[CONTENT_TYPE] = kind
            accepted = True
        found = stristr(rest, "charset=")
        if found is not None and len(found) > 8:
            self.headers[CHARSET] = found[8:]
        return accepted

    def content_type(self) -> str:
        """Content type, ``unknown`` if none was given."""
        return self.headers.get(CONTENT_TYPE, "unknown")

    def charset(self) -> str:
        """Character set, recording ISO-8859-1 when none was given."""
        return self.headers.setdefault(CHARSET, DEFAULT_CHARSET)

    def set_content_length(self, line: str) -> bool:
        """Take a Content-Length line; lengths below 2 are not recorded."""
        if _has_prefix(line, CONTENT_LENGTH):
            value = line[len(CONTENT_LENGTH) + 2:]
            if _atoi(value) > 1:
                self.headers[CONTENT_LENGTH] = value
                return True
        return False

    def content_length(self) -> int:
        """Content length, 0 if unknown."""
        return self._int_value(CONTENT_LENGTH, 0)

    def set_content_encoding(self, line: str) -> bool:
        """Take a Content-Encoding line; only gzip and deflate are accepted."""
        if _has_prefix(line, CONTENT_ENCODING):
            value = line[len(CONTENT_ENCODING) + 2:]
            for name, encoding in (("gzip", ContentEncoding.GZIP),
                                   ("deflate", ContentEncoding.DEFLATE)):
                if strmatch(value, name):
                    self.headers[CONTENT_ENCODING] = str(int(encoding))
                    return True
        return False

    def content_encoding(self) -> ContentEncoding | None:
        """Content encoding, None when the body is not encoded."""
        value = self._int_value(CONTENT_ENCODING, 0)
        try:
            return ContentEncoding(value)
        except ValueError:
            return None

    def set_transfer_encoding(self, line: str) -> bool:
        """Take a Transfer-Encoding line: chunked, trailer or anything else."""
        if not _has_prefix(line, TRANSFER_ENCODING):
            return False
        value = trim(line[len(TRANSFER_ENCODING) + 2:]) or ""
        if strmatch(value, "chunked"):
            encoding = TransferEncoding.CHUNKED
        elif strmatch(value, "trailer"):
            encoding = TransferEncoding.TRAILER
        else:
            encoding = TransferEncoding.NONE
        self.headers[TRANSFER_ENCODING] = str(int(encoding))
        return True

    def transfer_encoding(self) -> TransferEncoding:
        """Transfer encoding, NONE by default."""
        value = self._int_value(TRANSFER_ENCODING, TransferEncoding.NONE)
        try:
            return TransferEncoding(value)
        except ValueError:
            return TransferEncoding.NONE

    def set_location(self, line: str) -> bool:
        """Take a Location or Content-Location line; True once a redirect is known."""
        for name in (LOCATION, CONTENT_LOCATION):
            if _has_prefix(line, name):
                self.headers[LOCATION] = line[len(name) + 2:]
                self.headers[REDIRECT] = "true"
        return self._bool_value(REDIRECT, False)

    def location(self) -> str | None:
        """Redirect target, if any."""
        return self.headers.get(LOCATION)

    def redirect(self) -> bool:
        """True if a Location header was seen."""
        return self._bool_value(REDIRECT, False)

    def set_connection(self, line: str) -> bool:
        """Take a Connection line: keep-alive or close."""
        if not _has_prefix(line, CONNECTION):
            return False
        if _has_prefix(line[len(CONNECTION) + 2:], "keep-alive"):
            value = HttpConnection.KEEPALIVE
        else:
            value = HttpConnection.CLOSE
        self.headers[CONNECTION] = str(int(value))
        return True

    def connection(self) -> HttpConnection:
        """Connection directive, CLOSE by default."""
        value = self._int_value(CONNECTION, HttpConnection.CLOSE)
        try:
            return HttpConnection(value)
        except ValueError:
            return HttpConnection.CLOSE

    def set_keepalive(self, line: str) -> bool:
        """Take a Keep-Alive line with timeout and max parameters."""
        accepted = False
        for pair in _pairs(line):
            option, value = _split_pair(pair)
            for name, key in (("timeout", KEEPALIVE_TIMEOUT), ("max", KEEPALIVE_MAX)):
                if _has_prefix(option, name):
                    if _atoi(value) > 0:
                        self.headers[key] = value
                    accepted = True
        return accepted

    def keepalive_timeout(self) -> int:
        """Keep-alive timeout in seconds, 15 by default."""
        return self._int_value(KEEPALIVE_TIMEOUT, 15)

    def keepalive_max(self) -> int:
        """Most requests on one connection, 5 by default."""
        return self._int_value(KEEPALIVE_MAX, 5)

    def set_last_modified(self, line: str) -> bool:
        """Take a Last-Modified line."""
        if _has_prefix(line, LAST_MODIFIED):
            self.headers[LAST_MODIFIED] = line[len(LAST_MODIFIED) + 2:]
            return True
        return False

    def last_modified(self) -> str | None:
        """Last-Modified date as sent."""
        return self.headers.get(LAST_MODIFIED)

    def set_etag(self, line: str) -> bool:
        """Take an ETag line; surrounding quotes are removed."""
        if _has_prefix(line, ETAG):
            self.headers[ETAG] = _dequote(line[len(ETAG) + 2:])
            return True
        return False

    def etag(self) -> str | None:
        """Entity tag without quotes."""
        return self.headers.get(ETAG)

    def set_www_authenticate(self, line: str) -> bool:
        """Take a WWW-Authenticate line: scheme, challenge and realm."""
        if not _has_prefix(line, WWW_AUTHENTICATE):
            return True
        offset = len(WWW_AUTHENTICATE) + 2
        params = line
        if _has_prefix(line[offset:], "digest"):
            params = line[offset + 6:]
            self.www_auth_type = AuthType.DIGEST
            self.www_auth_challenge = line[offset:]
        elif _has_prefix(line[offset:], "ntlm"):
            params = line[offset + 4:]
            self.www_auth_type = AuthType.NTLM
            self.www_auth_challenge = line[offset:]
        elif self.www_auth_type not in (AuthType.DIGEST, AuthType.NTLM):
            # a scheme already parsed from an earlier header is kept
            params = line[offset + 5:]
            self.www_auth_type = AuthType.BASIC
        for pair in _pairs(params):
            option, value = _split_pair(pair)
            if _has_prefix(option, "realm"):
                self.www_auth_realm = _dequote(value)
        return True

    def set_proxy_authenticate(self, line: str) -> bool:
        """Take a Proxy-Authenticate line: scheme, challenge and realm."""
        if not _has_prefix(line, PROXY_AUTHENTICATE):
            return True
        offset = len(PROXY_AUTHENTICATE) + 2
        if _has_prefix(line[offset:], "digest"):
            params = line[offset + 6:]
            self.proxy_auth_type = AuthType.DIGEST
            self.proxy_auth_challenge = line[offset:]
        else:
            params = line[offset + 5:]
            self.proxy_auth_type = AuthType.BASIC
        for pair in _pairs(params):
            option, value = _split_pair(pair)
            if _has_prefix(option, "realm"):
                self.proxy_auth_realm = _dequote(value)
        return True