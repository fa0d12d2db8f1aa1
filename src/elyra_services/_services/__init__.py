from ._classifier import Decoded, DecodeFailed, classify
from .request_handler import RequestHandler

__all__ = [
    "Decoded",
    "DecodeFailed",
    "RequestHandler",
    "classify",
]
