from enum import Enum


class StockAction(str, Enum):
    INCREASE = "INCREASE"
    DECREASE = "DECREASE"
    OVERRIDE = "OVERRIDE"
