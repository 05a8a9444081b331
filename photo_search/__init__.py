"""Photo search package for PhotoBot.

Wraps the Flickr photo search API and returns an explicit tagged result
(``Found`` / ``NotFound`` / ``Failed``) so that callers never confuse an
empty search with a failed one.
"""

from .flickr import FlickrClient
from .results import Failed, Found, NotFound, PhotoResult, SearchFailed

__all__ = [
    "FlickrClient",
    "Failed",
    "Found",
    "NotFound",
    "PhotoResult",
    "SearchFailed",
]
