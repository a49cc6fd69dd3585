"""Utility modules for the Canvas client SDK."""

from .config_loader import load_config
from .data_masker import DataMasker
from .http_client import HttpClient
from .link_header import parse_link_header
from .pagination import PaginatedSequence
from .params import normalize_params

__all__ = [
    "DataMasker",
    "HttpClient",
    "PaginatedSequence",
    "load_config",
    "normalize_params",
    "parse_link_header",
]
