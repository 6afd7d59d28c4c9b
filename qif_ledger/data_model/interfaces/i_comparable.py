# qif_ledger/data_model/interfaces/i_comparable.py
from __future__ import annotations


from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IComparable(Protocol):
    def __eq__(self, other: object) -> bool: ...
    def __lt__(self, other: object) -> bool: ...
