"""String rules."""
from __future__ import annotations

import ipaddress
import re
from collections.abc import Sequence, Sized
from functools import lru_cache
from typing import Any
from urllib.parse import urlsplit

from ..strategy import ValidationStrategy

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_SPECIAL_CHARACTER = re.compile(r"[^\w\s]")
_TLD = re.compile(r"\.[a-zA-Z]{2,63}$|\.xn--[a-zA-Z0-9-]+$")

DISPOSABLE_EMAIL_DOMAINS: tuple[str, ...] = (
    "@yopmail", "@ymail", "@jetable", "@trashmail", "@jvlicenses", "@temp-mail", "@emailnax", "@datakop",
)

DISPOSABLE_URL_DOMAINS: tuple[str, ...] = (
    # URL shorteners
    "bit.ly", "tinyurl.com", "goo.gl", "ow.ly", "t.co", "is.gd", "buff.ly", "adf.ly", "bc.vc", "soo.gd", "clk.im",
    "s2r.co", "shrtco.de", "rb.gy", "cutt.ly", "short.io", "tiny.cc",
    # Temporary file hosting
    "file.io", "transfer.sh", "temp.sh", "tmpfiles.org", "0x0.st", "uguu.se", "catbox.moe", "litterbox.catbox.moe",
    "pixeldrain.com", "gofile.io", "anonfiles.com", "bayfiles.com",
    # Free hosting
    "000webhostapp.com", "freehosting.com", "freehostia.com", "x10hosting.com", "byethost.com", "5gbfree.com",
    "freewha.com",
    # Tunnels
    "ngrok.io", "ngrok-free.app", "localtunnel.me", "serveo.net", "localhost.run",
)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern | None:
    try:
        return re.compile(pattern)
    except re.error:
        return None


def _length(value: Any) -> int:
    if isinstance(value, Sized): return len(value)
    return len(str(value))


def _host(value: str) -> str | None:
    try:
        return urlsplit(value).hostname
    except ValueError:
        return None


class Email(ValidationStrategy):
    name = "email"
    description = "Validates that a value is a valid email address"
    category = "String"
    examples = ('dv.field("email").email()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


class DisposableEmail(ValidationStrategy):
    name = "disposable_email"
    description = "Validates that an email address does not belong to a disposable email provider"
    category = "String"
    examples = ('dv.field("email").disposable_email()', 'dv.field("email").disposable_email(["@mailinator"])')
    param_docs = {"disposables": ("Disposable domain patterns (defaults to the built-in list)", [])}

    def handler(self, value: Any, disposables: Sequence[str] = ()) -> bool:
        if not isinstance(value, str) or "@" not in value: return False
        domain = value.split("@", 1)[1].lower()
        if not domain: return False
        for pattern in disposables or DISPOSABLE_EMAIL_DOMAINS:
            disposable = pattern.lstrip("@").lower()
            if domain.startswith(disposable) or f".{disposable}" in domain:
                return False
        return True


class Url(ValidationStrategy):
    name = "url"
    description = "Validates that a value is a valid URL with configurable schemes and TLD requirement"
    category = "String"
    examples = (
        'dv.field("website").url()',
        'dv.field("api").url(["http", "https", "ws", "wss"])',
        'dv.field("intranet").url(["http"], False)',
    )
    param_docs = {
        "schemes": ("Allowed URL schemes", ["http", "https"]),
        "require_tld": ("Require a top-level domain (.com, .org, ...)", True),
    }

    def handler(self, value: Any, schemes: Sequence[str] = ("http", "https"), require_tld: bool = True) -> bool:
        if not isinstance(value, str) or not value or any(c.isspace() for c in value): return False
        try:
            parts = urlsplit(value)
            host = parts.hostname
        except ValueError:
            return False
        if parts.scheme.lower() not in {s.lower() for s in schemes} or not host: return False
        try:
            ipaddress.ip_address(host)
            return True
        except ValueError:
            pass
        if not require_tld: return True
        return bool(_TLD.search(host))


class DisposableUrlDomain(ValidationStrategy):
    name = "disposable_url_domain"
    description = "Validates that a URL is not from a disposable/temporary domain (URL shorteners, free hosting, etc.)"
    category = "String"
    examples = ('dv.field("website").disposable_url_domain()',
                'dv.field("website").disposable_url_domain(["bit.ly", "tinyurl.com"])')
    param_docs = {"disposables": ("Disposable domain patterns (defaults to the built-in list)", [])}

    def handler(self, value: Any, disposables: Sequence[str] = ()) -> bool:
        if not isinstance(value, str) or not value: return False
        if not (host := _host(value)): return False
        host = host.lower()
        for pattern in disposables or DISPOSABLE_URL_DOMAINS:
            disposable = pattern.lstrip(".").lower()
            if host == disposable or host.endswith(f".{disposable}"):
                return False
        return True


class IpAddress(ValidationStrategy):
    name = "ip_address"
    description = "Validates that a value is an IPv4 or IPv6 address"
    category = "String"
    examples = ('dv.field("client_ip").ip_address()',)

    def handler(self, value: Any) -> bool:
        if not isinstance(value, str): return False
        try:
            ipaddress.ip_address(value)
        except ValueError:
            return False
        return True


class MinLength(ValidationStrategy):
    name = "min_length"
    description = "Validates that a string has a minimum length"
    category = "String"
    examples = ('dv.field("password").min_length(8)',)
    param_docs = {"min": ("Minimum length required", 8)}

    def handler(self, value: Any, min: int) -> bool: return _length(value) >= min


class MaxLength(ValidationStrategy):
    name = "max_length"
    description = "Validates that a string does not exceed a maximum length"
    category = "String"
    examples = ('dv.field("username").max_length(20)',)
    param_docs = {"max": ("Maximum length allowed", 20)}

    def handler(self, value: Any, max: int) -> bool: return _length(value) <= max


class Regex(ValidationStrategy):
    name = "regex"
    description = "Validates that a string matches a regular expression"
    category = "String"
    examples = ('dv.field("zip").regex(r"^\\d{5}$")',)
    param_docs = {"pattern": ("Regular expression (searched, anchor it to match the whole value)", r"^\d{5}$")}

    def handler(self, value: Any, pattern: str) -> bool:
        if not isinstance(value, str) or (compiled := _compile(pattern)) is None: return False
        return compiled.search(value) is not None


class Alphanumeric(ValidationStrategy):
    name = "alphanumeric"
    description = "Validates that a string contains only ASCII letters and digits"
    category = "String"
    examples = ('dv.field("username").alphanumeric()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str) and value.isascii() and value.isalnum()


class NotAlphanumeric(ValidationStrategy):
    name = "not_alphanumeric"
    description = "Validates that a string is not purely alphanumeric"
    category = "String"
    examples = ('dv.field("separator").not_alphanumeric()',)

    def handler(self, value: Any) -> bool:
        return isinstance(value, str) and not (value.isascii() and value.isalnum())


class ContainsLower(ValidationStrategy):
    name = "contains_lower"
    description = "Validates that a string contains at least one lowercase letter"
    category = "String"
    examples = ('dv.field("password").contains_lower()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str) and any(c.islower() for c in value)


class ContainsUpper(ValidationStrategy):
    name = "contains_upper"
    description = "Validates that a string contains at least one uppercase letter"
    category = "String"
    examples = ('dv.field("password").contains_upper()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str) and any(c.isupper() for c in value)


class ContainsNumber(ValidationStrategy):
    name = "contains_number"
    description = "Validates that a string contains at least one digit"
    category = "String"
    examples = ('dv.field("password").contains_number()',)

    def handler(self, value: Any) -> bool: return isinstance(value, str) and any(c.isdigit() for c in value)


class ContainsSpecialCharacter(ValidationStrategy):
    name = "contains_special_character"
    description = "Validates that a string contains at least one special character"
    category = "String"
    examples = ('dv.field("password").contains_special_character()',)

    def handler(self, value: Any) -> bool:
        return isinstance(value, str) and _SPECIAL_CHARACTER.search(value) is not None
