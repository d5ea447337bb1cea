from enum import Enum

class BookFormat(str, Enum):
    POCKET = "Pocket"
    STANDARD = "Standard"
    BIG = "Big"
