"""Precedence-aware printer for de Bruijn expressions.

Every syntactic form is printed at a level, and every position an expression can
appear in imposes a maximum level.  An expression is parenthesized when its own
level exceeds the maximum of the position it is printed in.

Applications are level 1.  The function position of an application allows level 1
and the argument position allows level 0, so App(App(e1, e2), e3) prints as
"e1 e2 e3" while App(e1, App(e2, e3)) prints as "e1 (e2 e3)".  Lambdas are level 3,
so they are parenthesized in either position of an application.

Expressions do not carry variable names.  Names are chosen at print time from the
hints stored on lambdas: a binder whose variable is never used prints as a
placeholder, and a used binder gets a name that does not clash with anything
already in scope.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Collection, Iterable, List, Sequence, TypeVar

from debruijn.debruijn_ast import DeBruijnApp, DeBruijnExpr, DeBruijnLambda, DeBruijnSubst, DeBruijnVar
from debruijn.debruijn_beautify import refresh
from debruijn.debruijn_error import DeBruijnError, DeBruijnNameLookupError
from debruijn.debruijn_formatter import DEFAULT_MAX_GROUPS, DeBruijnFormatter
from debruijn.debruijn_syntax import force_node, occurs


APP_LEVEL = 1
LAMBDA_LEVEL = 3

T = TypeVar('T')


@dataclass
class DeBruijnPrintOptions:
    """Options for controlling printer behavior."""
    max_groups: int = DEFAULT_MAX_GROUPS
    placeholder: str = "_"
    lambda_symbol: str = "λ"


class DeBruijnPrinter:
    """Renders de Bruijn expressions with minimal parentheses and readable names."""

    def __init__(
        self,
        options: DeBruijnPrintOptions | None = None,
        freshen: Callable[[str, Collection[str]], str] | None = None
    ):
        """
        Initialize the printer.

        Args:
            options: Printing options (defaults used if None)
            freshen: Function returning a variant of a name that is not in a given
                collection of names (debruijn_beautify.refresh if None)
        """
        self._options = options or DeBruijnPrintOptions()
        self._freshen = freshen or refresh
        self._logger = logging.getLogger("DeBruijnPrinter")

    def format_expr(self, context: Sequence[str], expr: DeBruijnExpr, max_level: int | None = None) -> str:
        """
        Render an expression to a string.

        Args:
            context: Names of the free variables, index 0 first
            expr: Expression to render
            max_level: Maximum level allowed without parentheses (None for unbounded)

        Returns:
            The rendered expression

        Raises:
            DeBruijnNameLookupError: If a free variable has no name in context
        """
        formatter = DeBruijnFormatter(self._options.max_groups)
        self.print_expr(formatter, context, expr, max_level)
        return formatter.getvalue()

    def format_sequence(
        self,
        render_item: Callable[[DeBruijnFormatter, T], None],
        items: Iterable[T],
        separator: str = ""
    ) -> str:
        """Render a sequence of items to a string."""
        formatter = DeBruijnFormatter(self._options.max_groups)
        self.print_sequence(formatter, render_item, items, separator)
        return formatter.getvalue()

    def format_ident(self, name: str) -> str:
        """Render an identifier to a string."""
        formatter = DeBruijnFormatter(self._options.max_groups)
        self.print_ident(formatter, name)
        return formatter.getvalue()

    def print_at(
        self,
        formatter: DeBruijnFormatter,
        render: Callable[[DeBruijnFormatter], None],
        max_level: int | None = None,
        at_level: int = 0
    ) -> None:
        """
        Emit output in a group, parenthesized if at_level exceeds max_level.

        The group and any parentheses are closed even if render raises.

        Args:
            formatter: Output sink
            render: Function that emits the output
            max_level: Maximum level allowed without parentheses (None for unbounded)
            at_level: Level of the output being emitted
        """
        parenthesize = max_level is not None and at_level > max_level
        if parenthesize:
            formatter.text('(')

        try:
            with formatter.group():
                render(formatter)

        finally:
            if parenthesize:
                formatter.text(')')

    def print_sequence(
        self,
        formatter: DeBruijnFormatter,
        render_item: Callable[[DeBruijnFormatter, T], None],
        items: Iterable[T],
        separator: str = ""
    ) -> None:
        """
        Emit items separated by separator and a break hint.

        Each item gets its own group, and the separator and break that follow an
        item belong to that item's group.  Nothing is emitted for an empty
        sequence, and no separator follows the last item.
        """
        pending = list(items)
        last = len(pending) - 1
        for i, item in enumerate(pending):
            def render(f: DeBruijnFormatter, item: T = item, separated: bool = i < last) -> None:
                render_item(f, item)
                if separated:
                    f.text(separator)
                    f.break_hint()

            self.print_at(formatter, render)

    def print_ident(self, formatter: DeBruijnFormatter, name: str) -> None:
        """Emit an identifier."""
        self.print_at(formatter, lambda f: f.text(name))

    def print_lambda(self, formatter: DeBruijnFormatter, context: Sequence[str], name: str, body: DeBruijnExpr) -> None:
        """
        Emit a run of nested lambdas as a single "λ x y z . body".

        Args:
            formatter: Output sink
            context: Names of the variables in scope outside the outermost lambda
            name: Name hint of the outermost lambda
            body: Body of the outermost lambda
        """
        hints = [name]
        body = force_node(body)
        while isinstance(body, DeBruijnLambda):
            hints.append(body.name)
            body = force_node(body.body)

        # The innermost binder is index 0 in the body, so names are chosen from the
        # inside out, each one avoiding the outer context and the ones already chosen.
        excluded: List[str] = list(context)
        chosen: List[str] = []
        for index, hint in enumerate(reversed(hints)):
            if occurs(index, body):
                binder = self._freshen(hint, excluded)

            else:
                binder = self._options.placeholder

            chosen.append(binder)
            excluded.append(binder)

        inner_context = chosen + list(context)
        names = list(reversed(chosen))

        def render(f: DeBruijnFormatter) -> None:
            f.text(f"{self._options.lambda_symbol} ")
            self.print_sequence(f, self.print_ident, names)
            f.text(" .")
            f.break_hint()
            self.print_expr(f, inner_context, body)

        self.print_at(formatter, render, at_level=LAMBDA_LEVEL)

    def print_expr(
        self,
        formatter: DeBruijnFormatter,
        context: Sequence[str],
        expr: DeBruijnExpr,
        max_level: int | None = None
    ) -> None:
        """
        Emit an expression.

        If the formatter already has too many groups open the expression is
        skipped and nothing is emitted for it.

        Args:
            formatter: Output sink
            context: Names of the free variables, index 0 first
            expr: Expression to emit
            max_level: Maximum level allowed without parentheses (None for unbounded)

        Raises:
            DeBruijnNameLookupError: If a free variable has no name in context
        """
        if formatter.over_max_groups():
            self._logger.debug("Group limit reached at depth %d, skipping %s", formatter.depth(), type(expr).__name__)
            return

        if isinstance(expr, DeBruijnVar):
            index = expr.index
            if not 0 <= index < len(context):
                raise DeBruijnNameLookupError(index, len(context), expr.location)

            self.print_at(formatter, lambda f: f.text(context[index]), max_level)
            return

        if isinstance(expr, DeBruijnSubst):
            self.print_expr(formatter, context, force_node(expr), max_level)
            return

        if isinstance(expr, DeBruijnLambda):
            self.print_at(
                formatter,
                lambda f: self.print_lambda(f, context, expr.name, expr.body),
                max_level,
                LAMBDA_LEVEL
            )
            return

        if isinstance(expr, DeBruijnApp):
            def render(f: DeBruijnFormatter) -> None:
                self.print_expr(f, context, expr.fn, APP_LEVEL)
                f.break_hint()
                self.print_expr(f, context, expr.arg, 0)

            self.print_at(formatter, render, max_level, APP_LEVEL)
            return

        raise DeBruijnError(f"Cannot print unknown expression: {expr!r}", {'expr': expr})
