from pushui.integrations.time.abc import Time
from pushui.integrations.time.fake import FakeTime
from pushui.integrations.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
