from pubcheck.core.http.abc import HttpClient
from pubcheck.core.http.real import RealHttpClient
from pubcheck.core.http.types import HttpResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
    "RealHttpClient",
]
