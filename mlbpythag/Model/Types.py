from enum import Enum


class Outcome(Enum):
    '''
    Enum for game outcomes - keyed by the leading character of the result marker
    '''
    WIN = "W"
    LOSS = "L"
