from enum import Enum


class SignalWord(str, Enum):
    danger = "Danger"
    warning = "Warning"
    none = "No Signal Word"


class PrecautionaryType(str, Enum):
    general = "General"
    prevention = "Prevention"
    response = "Response"
    storage = "Storage"
    disposal = "Disposal"
