from enum import Enum

class ResultStatus(str, Enum):
    ELIGIBLE = "ELIGIBLE"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"
    INPUT_INVALID = "INPUT_INVALID"

class InputField(str, Enum):
    AGE = "AGE"
    WEIGHT = "WEIGHT"
