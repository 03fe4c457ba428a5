"""Router helper utilities."""

from .envelope_utils import envelope_response

__all__ = ["envelope_response"]
