# qif_ledger/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over a text format: a **parser**
that converts a textual representation into a domain object, and an
**emitter** that serializes such an object back to text.

The protocol is generic in the item type ``T`` to allow strong typing at call
sites (e.g., ``IParserEmitter[FinancialData]``).

### Design goals & expectations for implementers

- **Determinism:** Given the same input string, ``parse`` must produce equal
  objects. Given equal objects, ``emit`` must produce identical text.
- **Losslessness:** Round-tripping must hold for every object ``parse`` can
  produce:

    ``parse(emit(x)) == x``

  Field rendering (numbers, dates) is canonical, so ``emit(parse(s))`` is
  equal to ``s`` only up to that canonical formatting.
- **Order preservation:** ``parse`` keeps items in the order they appear in
  the source.
- **Purity:** ``parse`` and ``emit`` avoid global state, perform no I/O and do
  not mutate arguments.
- **Errors:** On unrecoverable format errors, raise ``ValueError`` (or a
  documented subclass) with actionable context (record index, line number and
  the offending line).

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching methods is considered compatible without explicit inheritance.
"""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Runtime-checkable protocol for paired parser/emitter implementations.
    """

    def parse(self, unparsed_string: str) -> T:
        """
        Parse a complete textual document into an object.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document. Line endings ``\\n``,
            ``\\r\\n`` and ``\\r`` must be treated equivalently.

        Returns
        -------
        T
            The parsed object. An input holding no records yields an empty
            object rather than an error.

        Raises
        ------
        ValueError
            If the input cannot be parsed due to malformed content.
        """
        ...

    def emit(self, item: T) -> str:
        """
        Serialize an object into a single textual document.

        Implementations validate invariants (for example, that split amounts
        total to the parent amount) and raise with context if violations are
        encountered, rather than emitting corrupt text.

        Returns
        -------
        str
            The emitted document, ``\\n`` line endings, formatted canonically.
        """
        ...
