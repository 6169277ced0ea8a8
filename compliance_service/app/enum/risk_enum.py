from enum import Enum


class HazardSource(str, Enum):
    manual = "Manual"
    product = "Product"
