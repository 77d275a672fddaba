"""Sorts and types of the sorted first-order languages (TFF0 and TFF1)."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .names import Named, Name, Var


class Sort(Named):
    """Built-in sorts."""
    I = "i"
    O = "o"
    INT = "int"
    REAL = "real"
    RAT = "rat"


@dataclass(frozen=True)
class SortVariable:
    """A sort variable, bound by a ``!>`` type quantifier."""
    var: Var

    def __str__(self):
        return str(self.var)


@dataclass(frozen=True)
class SortApplication:
    """A sort constructor applied to zero or more sorts.

    A zero-arity application is a plain sort such as ``$int`` or ``list``.
    """
    name: Name
    arguments: Tuple["TFF1Sort", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


TFF1Sort = Union[SortVariable, SortApplication]


def monomorphize_tff1_sort(sort: TFF1Sort) -> Optional[Name]:
    """Convert a TFF1 sort to a plain sort name if it has no arguments."""
    if isinstance(sort, SortApplication) and not sort.arguments:
        return sort.name
    return None


@dataclass(frozen=True)
class Type:
    """A monomorphic type ``(s1 * ... * sn) > s``."""
    arguments: Tuple[Name, ...]
    result: Name

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))


@dataclass(frozen=True)
class TFF1Type:
    """A possibly quantified polymorphic type ``!>[A: $tType, ...]: ... > s``.

    Use :func:`tff1_type` rather than this constructor so that types
    without polymorphism are kept in the monomorphic form.
    """
    variables: Tuple[Var, ...]
    arguments: Tuple[TFF1Sort, ...]
    result: TFF1Sort

    def __post_init__(self):
        object.__setattr__(self, "variables", tuple(self.variables))
        object.__setattr__(self, "arguments", tuple(self.arguments))


AnyType = Union[Type, TFF1Type]


def tff1_type(variables: Sequence[Var],
              arguments: Sequence[TFF1Sort],
              result: TFF1Sort) -> AnyType:
    """Build a type, preferring the monomorphic representation.

    A :class:`TFF1Type` is only returned if the type quantifies over sort
    variables or mentions a sort that is not a zero-arity application.
    """
    if not variables:
        monomorphic = [monomorphize_tff1_sort(s) for s in arguments]
        returned = monomorphize_tff1_sort(result)
        if returned is not None and all(s is not None for s in monomorphic):
            return Type(tuple(monomorphic), returned)
    return TFF1Type(tuple(variables), tuple(arguments), result)
