"""Explicit substitutions over de Bruijn expressions.

Substitutions are pushed through an expression one node at a time.  Forcing a
pending substitution only resolves the head of the expression; the children of the
result carry their own pending substitutions and are forced when they are visited.
"""

from typing import List, Tuple

from debruijn.debruijn_ast import (
    IDENTITY, DeBruijnApp, DeBruijnDot, DeBruijnExpr, DeBruijnLambda, DeBruijnShift,
    DeBruijnSubst, DeBruijnSubstitution, DeBruijnVar
)
from debruijn.debruijn_error import DeBruijnSubstitutionError


def _is_identity(substitution: DeBruijnSubstitution) -> bool:
    return isinstance(substitution, DeBruijnShift) and substitution.amount == 0


def subst(substitution: DeBruijnSubstitution, expr: DeBruijnExpr) -> DeBruijnExpr:
    """
    Wrap an expression in a pending substitution.

    A pending substitution directly around another one is merged into a single
    node rather than nested.

    Args:
        substitution: Substitution to apply
        expr: Expression to apply it to

    Returns:
        The expression with the substitution pending over it
    """
    if _is_identity(substitution):
        return expr

    if isinstance(expr, DeBruijnSubst):
        return DeBruijnSubst(compose(substitution, expr.substitution), expr.body, location=expr.location)

    return DeBruijnSubst(substitution, expr, location=expr.location)


def shift(amount: int, expr: DeBruijnExpr) -> DeBruijnExpr:
    """Shift every free index in expr by amount."""
    return subst(DeBruijnShift(amount), expr)


def instantiate(body: DeBruijnExpr, arg: DeBruijnExpr) -> DeBruijnExpr:
    """Replace index 0 of a lambda body with arg (the result of a beta step)."""
    return subst(DeBruijnDot(arg, IDENTITY), body)


def compose(outer: DeBruijnSubstitution, inner: DeBruijnSubstitution) -> DeBruijnSubstitution:
    """
    Compose two substitutions.

    Args:
        outer: Substitution applied second
        inner: Substitution applied first

    Returns:
        A substitution equivalent to applying inner and then outer

    Raises:
        DeBruijnSubstitutionError: If the substitutions cannot be composed
    """
    while isinstance(inner, DeBruijnShift):
        if inner.amount == 0:
            return outer

        if isinstance(outer, DeBruijnShift):
            return DeBruijnShift(outer.amount + inner.amount)

        if not isinstance(outer, DeBruijnDot) or inner.amount < 0:
            raise DeBruijnSubstitutionError(
                f"Cannot compose {outer!r} after {inner!r}",
                {'outer': outer, 'inner': inner}
            )

        # Shifting past the head of a dot just drops it.
        outer = outer.rest
        inner = DeBruijnShift(inner.amount - 1)

    if isinstance(inner, DeBruijnDot):
        return DeBruijnDot(subst(outer, inner.expr), compose(outer, inner.rest))

    raise DeBruijnSubstitutionError(f"Unknown substitution: {inner!r}", {'inner': inner})


def _lookup(var: DeBruijnVar, substitution: DeBruijnSubstitution) -> DeBruijnExpr:
    """Find what a substitution maps a variable to."""
    index = var.index
    while True:
        if isinstance(substitution, DeBruijnShift):
            new_index = index + substitution.amount
            if new_index < 0:
                raise DeBruijnSubstitutionError(
                    f"Shifting variable {var.index} produces negative index {new_index}",
                    {'index': var.index, 'shifted': new_index},
                    var.location
                )

            return DeBruijnVar(new_index, location=var.location)

        if isinstance(substitution, DeBruijnDot):
            if index == 0:
                return substitution.expr

            index -= 1
            substitution = substitution.rest
            continue

        raise DeBruijnSubstitutionError(
            f"Unknown substitution: {substitution!r}", {'substitution': substitution}, var.location
        )


def force(substitution: DeBruijnSubstitution, expr: DeBruijnExpr) -> DeBruijnExpr:
    """
    Apply a pending substitution to the head of an expression.

    Args:
        substitution: Substitution to apply
        expr: Expression to apply it to

    Returns:
        An equivalent variable, lambda or application node.  Never a DeBruijnSubst.

    Raises:
        DeBruijnSubstitutionError: If the substitution cannot be applied
    """
    while True:
        if isinstance(expr, DeBruijnSubst):
            substitution = compose(substitution, expr.substitution)
            expr = expr.body
            continue

        if isinstance(expr, DeBruijnVar):
            replacement = _lookup(expr, substitution)
            if not isinstance(replacement, DeBruijnSubst):
                return replacement

            # The replacement is already expressed in the target scope.
            substitution = IDENTITY
            expr = replacement
            continue

        if _is_identity(substitution):
            return expr

        if isinstance(expr, DeBruijnLambda):
            lifted = DeBruijnDot(DeBruijnVar(0), compose(DeBruijnShift(1), substitution))
            return DeBruijnLambda(expr.name, subst(lifted, expr.body), location=expr.location)

        if isinstance(expr, DeBruijnApp):
            return DeBruijnApp(
                subst(substitution, expr.fn), subst(substitution, expr.arg), location=expr.location
            )

        raise DeBruijnSubstitutionError(f"Cannot force unknown expression: {expr!r}", {'expr': expr})


def force_node(expr: DeBruijnExpr) -> DeBruijnExpr:
    """Resolve expr if it is a pending substitution, otherwise return it unchanged."""
    if isinstance(expr, DeBruijnSubst):
        return force(expr.substitution, expr.body)

    return expr


def occurs(index: int, expr: DeBruijnExpr) -> bool:
    """
    Check whether a de Bruijn index occurs free in an expression.

    The search uses an explicit work list, so arbitrarily deep expressions do
    not exhaust the Python stack.

    Args:
        index: Index to look for, relative to the top of expr
        expr: Expression to search

    Returns:
        True if the index is referenced anywhere in expr
    """
    pending: List[Tuple[int, DeBruijnExpr]] = [(index, expr)]
    while pending:
        target, node = pending.pop()
        node = force_node(node)

        if isinstance(node, DeBruijnVar):
            if node.index == target:
                return True

            continue

        if isinstance(node, DeBruijnLambda):
            pending.append((target + 1, node.body))
            continue

        if isinstance(node, DeBruijnApp):
            # Push the argument first so the function side is searched first.
            pending.append((target, node.arg))
            pending.append((target, node.fn))
            continue

        raise DeBruijnSubstitutionError(f"Cannot inspect unknown expression: {node!r}", {'expr': node})

    return False
