from enum import Enum


class TableNames(str, Enum):
    COUPLES = "couples"
    ADDRESSES = "addresses"
    GROUPS = "groups"
    GUESTS = "guests"
