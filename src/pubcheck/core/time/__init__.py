from pubcheck.core.time.abc import Time
from pubcheck.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
