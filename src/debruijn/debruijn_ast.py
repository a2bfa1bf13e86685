"""De Bruijn expression nodes and explicit substitutions.

Variables carry indices rather than names: index 0 refers to the nearest enclosing
lambda, index 1 to the one outside it, and so on.  Lambdas keep the name the user
originally wrote only as a hint for printing.

Substitutions are not carried out eagerly.  A DeBruijnSubst node records a pending
substitution over its body, and is only resolved when something needs to look at
the shape of the body (see debruijn_syntax.force).
"""

from dataclasses import dataclass, field

from debruijn.debruijn_location import DeBruijnLocation


@dataclass(frozen=True)
class DeBruijnExpr:
    """
    Base class for all expression nodes.

    Nodes are immutable.  The source location is keyword-only so node constructors
    keep their natural positional arguments.
    """
    location: DeBruijnLocation | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class DeBruijnVar(DeBruijnExpr):
    """A variable reference by de Bruijn index."""
    index: int


@dataclass(frozen=True)
class DeBruijnApp(DeBruijnExpr):
    """Application of a function to an argument."""
    fn: DeBruijnExpr
    arg: DeBruijnExpr


@dataclass(frozen=True)
class DeBruijnLambda(DeBruijnExpr):
    """Abstraction binding index 0 in its body."""
    name: str  # Display hint only
    body: DeBruijnExpr


@dataclass(frozen=True)
class DeBruijnSubstitution:
    """Base class for explicit substitutions."""


@dataclass(frozen=True)
class DeBruijnShift(DeBruijnSubstitution):
    """Maps index k to k + amount.  A shift of 0 is the identity."""
    amount: int


@dataclass(frozen=True)
class DeBruijnDot(DeBruijnSubstitution):
    """Maps index 0 to expr and index k + 1 to whatever rest maps k to."""
    expr: DeBruijnExpr
    rest: DeBruijnSubstitution


@dataclass(frozen=True)
class DeBruijnSubst(DeBruijnExpr):
    """A substitution waiting to be applied to body."""
    substitution: DeBruijnSubstitution
    body: DeBruijnExpr


IDENTITY = DeBruijnShift(0)
