"""
Core module - Security, pagination and logging utilities.
"""
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from app.core.pagination import (
    parse_page_param,
    compute_skip,
    build_page,
)
from app.core.logging_config import setup_logging

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "parse_page_param",
    "compute_skip",
    "build_page",
    "setup_logging",
]
