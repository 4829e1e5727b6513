"""REST runtime: transports, decoding and pagination."""

from .async_page import AsyncOwnedPage, AsyncPage, AsyncSender
from .decoding import decode_json, deserialize, raise_for_status
from .http_client import BlockingHTTPClient, HTTPClient
from .items import AsyncItemsIterator, ItemsIterator
from .link_header import parse_link_header
from .page import Cursor, FetchDescriptor, OwnedPage, Page, Sender
from .response import RawResponse

__all__ = [
    "HTTPClient",
    "BlockingHTTPClient",
    "RawResponse",
    "parse_link_header",
    "decode_json",
    "deserialize",
    "raise_for_status",
    "FetchDescriptor",
    "Cursor",
    "Sender",
    "AsyncSender",
    "Page",
    "OwnedPage",
    "AsyncPage",
    "AsyncOwnedPage",
    "ItemsIterator",
    "AsyncItemsIterator",
]
