from ._request_spec import DecodeAs, HttpMethod, RequestSpec
from ._url import url_join

__all__ = [
    "DecodeAs",
    "HttpMethod",
    "RequestSpec",
    "url_join",
]
