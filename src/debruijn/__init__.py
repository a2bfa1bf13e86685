"""
Pretty-printing of lambda-calculus expressions in de Bruijn form.

This package renders expressions that use de Bruijn indices and explicit
substitutions as readable text with minimal parentheses and non-clashing
binder names, and provides leveled diagnostic messages.
"""

from debruijn.debruijn_ast import (
    IDENTITY,
    DeBruijnApp,
    DeBruijnDot,
    DeBruijnExpr,
    DeBruijnLambda,
    DeBruijnShift,
    DeBruijnSubst,
    DeBruijnSubstitution,
    DeBruijnVar,
)
from debruijn.debruijn_beautify import refresh
from debruijn.debruijn_error import (
    DeBruijnError,
    DeBruijnFormatterError,
    DeBruijnNameLookupError,
    DeBruijnSubstitutionError,
)
from debruijn.debruijn_formatter import DEFAULT_MAX_GROUPS, DeBruijnFormatter
from debruijn.debruijn_location import DeBruijnLocation, DeBruijnSourcePosition, format_position
from debruijn.debruijn_message import DeBruijnMessageConfig, DeBruijnMessenger
from debruijn.debruijn_printer import APP_LEVEL, LAMBDA_LEVEL, DeBruijnPrintOptions, DeBruijnPrinter
from debruijn.debruijn_syntax import compose, force, force_node, instantiate, occurs, shift, subst

__all__ = [
    # Expressions
    'DeBruijnExpr',
    'DeBruijnVar',
    'DeBruijnApp',
    'DeBruijnLambda',
    'DeBruijnSubst',
    'DeBruijnSubstitution',
    'DeBruijnShift',
    'DeBruijnDot',
    'IDENTITY',
    # Locations
    'DeBruijnSourcePosition',
    'DeBruijnLocation',
    'format_position',
    # Exceptions
    'DeBruijnError',
    'DeBruijnNameLookupError',
    'DeBruijnSubstitutionError',
    'DeBruijnFormatterError',
    # Substitutions
    'subst',
    'shift',
    'instantiate',
    'compose',
    'force',
    'force_node',
    'occurs',
    'refresh',
    # Printing
    'APP_LEVEL',
    'LAMBDA_LEVEL',
    'DEFAULT_MAX_GROUPS',
    'DeBruijnFormatter',
    'DeBruijnPrintOptions',
    'DeBruijnPrinter',
    # Messages
    'DeBruijnMessageConfig',
    'DeBruijnMessenger',
]
