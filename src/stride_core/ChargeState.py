from enum import Enum


class ChargeState(Enum):
    IDLE = "idle"
    CHARGING = "charging"
    ACTIVE = "active"
