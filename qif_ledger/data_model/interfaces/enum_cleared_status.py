from enum import Enum


class EnumClearedStatus(Enum):
    """
    Enum representing the cleared status of a transaction.
    """
    NOT_CLEARED = ''  # Not cleared
    CLEARED = '*'  # Cleared
    RECONCILED = 'X'  # Reconciled

    @classmethod
    def from_char(cls, char: str) -> 'EnumClearedStatus':
        """
        Convert the value of a QIF ``C`` line to a cleared status.
        """
        c = char.strip().lower()
        if c == "":
            return cls.NOT_CLEARED
        if c in ("*", "c"):
            return cls.CLEARED
        if c in ("x", "r"):
            return cls.RECONCILED
        raise ValueError(f"Unknown cleared status character: {char}")

    @property
    def is_cleared(self) -> bool:
        # Reconciled implies cleared
        return self is not EnumClearedStatus.NOT_CLEARED
