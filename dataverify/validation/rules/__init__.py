"""Built-in validation rules.

Each module groups one category; ``BUILTIN_RULES`` lists every strategy
class in registration order.
"""
from .comparison import IsIn, NotIn
from .core import Required
from .dates import Date
from .files import FileExists, FileMime
from .numeric import Between, GreaterThan, LowerThan
from .strings import (
    DISPOSABLE_EMAIL_DOMAINS,
    DISPOSABLE_URL_DOMAINS,
    EMAIL_PATTERN,
    Alphanumeric,
    ContainsLower,
    ContainsNumber,
    ContainsSpecialCharacter,
    ContainsUpper,
    DisposableEmail,
    DisposableUrlDomain,
    Email,
    IpAddress,
    MaxLength,
    MinLength,
    NotAlphanumeric,
    Regex,
    Url,
)
from .types import Boolean, Dict, Int, Json, List, Numeric, Object, String

BUILTIN_RULES = (
    # Core
    Required,
    # Type
    String, Int, Numeric, Boolean, List, Dict, Object, Json,
    # String
    Email, DisposableEmail, Url, DisposableUrlDomain, IpAddress, MinLength, MaxLength, Regex,
    Alphanumeric, NotAlphanumeric, ContainsLower, ContainsUpper, ContainsNumber, ContainsSpecialCharacter,
    # Numeric
    Between, GreaterThan, LowerThan,
    # Comparison
    IsIn, NotIn,
    # Date
    Date,
    # File
    FileExists, FileMime,
)

__all__ = [
    "BUILTIN_RULES",
    "DISPOSABLE_EMAIL_DOMAINS",
    "DISPOSABLE_URL_DOMAINS",
    "EMAIL_PATTERN",
    *(rule.__name__ for rule in BUILTIN_RULES),
]
