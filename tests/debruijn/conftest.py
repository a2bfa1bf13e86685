"""Shared fixtures and utilities for de Bruijn printer tests."""

import io

import pytest

from debruijn.debruijn_ast import DeBruijnApp, DeBruijnExpr, DeBruijnLambda, DeBruijnVar
from debruijn.debruijn_formatter import DeBruijnFormatter
from debruijn.debruijn_location import DeBruijnLocation, DeBruijnSourcePosition
from debruijn.debruijn_message import DeBruijnMessageConfig, DeBruijnMessenger
from debruijn.debruijn_printer import DeBruijnPrintOptions, DeBruijnPrinter


@pytest.fixture
def printer():
    """Create a printer with default options."""
    return DeBruijnPrinter()


@pytest.fixture
def printer_custom():
    """Factory for printers with custom configuration."""
    def _create_printer(max_groups: int = 200, placeholder: str = "_", lambda_symbol: str = "λ", freshen=None):
        options = DeBruijnPrintOptions(max_groups=max_groups, placeholder=placeholder, lambda_symbol=lambda_symbol)
        return DeBruijnPrinter(options, freshen)
    return _create_printer


@pytest.fixture
def formatter():
    """Create an empty formatter."""
    return DeBruijnFormatter()


@pytest.fixture
def error_stream():
    """Create an in-memory stream to capture messages."""
    return io.StringIO()


@pytest.fixture
def messenger_custom(error_stream):
    """Factory for messengers writing to error_stream with a given verbosity."""
    def _create_messenger(verbosity: int = 2):
        return DeBruijnMessenger(DeBruijnMessageConfig(verbosity=verbosity), error_stream)
    return _create_messenger


class DeBruijnTestHelpers:
    """Helper utilities for de Bruijn testing."""

    @staticmethod
    def lams(names: list[str], body: DeBruijnExpr) -> DeBruijnExpr:
        """Wrap body in lambdas, the first name outermost."""
        for name in reversed(names):
            body = DeBruijnLambda(name, body)

        return body

    @staticmethod
    def apps(*exprs: DeBruijnExpr) -> DeBruijnExpr:
        """Build a left-nested application chain."""
        result = exprs[0]
        for expr in exprs[1:]:
            result = DeBruijnApp(result, expr)

        return result

    @staticmethod
    def var(index: int) -> DeBruijnVar:
        """Create a variable."""
        return DeBruijnVar(index)

    @staticmethod
    def location(
        begin_line: int,
        begin_line_start: int,
        begin_offset: int,
        end_offset: int,
        filename: str = "",
        end_line: int | None = None,
        end_line_start: int | None = None
    ) -> DeBruijnLocation:
        """Create a location, by default with both ends on the same line."""
        begin = DeBruijnSourcePosition(filename, begin_line, begin_line_start, begin_offset)
        end = DeBruijnSourcePosition(
            filename,
            begin_line if end_line is None else end_line,
            begin_line_start if end_line_start is None else end_line_start,
            end_offset
        )
        return DeBruijnLocation(begin, end)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return DeBruijnTestHelpers
