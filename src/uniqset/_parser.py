__all__ = ["parse_set", "deparse"]

import math
import re

from parsita import ParseError, ParserContext, pred, reg, repsep
from returns import result

from ._exceptions import NotDeparsableError
from ._unique_set import UniqueSet

word_pattern = r"[A-Za-z_][A-Za-z0-9_]*"


class SetParsers(ParserContext, whitespace=r"\s*"):
    floating_point = pred(
        reg(r"-?[0-9]+((\.[0-9]+([Ee][+-]?[0-9]+)?)|((\.[0-9]+)?[Ee][+-]?[0-9]+))") > float,
        math.isfinite,
        "finite float",
    )
    integer = reg(r"-?[0-9]+") > int
    double_quoted = reg(r'"[^"]*"') > (lambda x: x[1:-1])
    single_quoted = reg(r"'[^']*'") > (lambda x: x[1:-1])
    word = reg(word_pattern)

    element = floating_point | integer | double_quoted | single_quoted | word

    set = "{" >> repsep(element, ",") << "}" > UniqueSet


def parse_set(string: str, /) -> result.Result[UniqueSet, ParseError]:
    return SetParsers.set.parse(string)


def deparse_element(element: object) -> str:
    match element:
        case bool():
            raise NotDeparsableError(element)
        case int():
            return str(element)
        case float() if math.isfinite(element):
            return repr(element)
        case str() if re.fullmatch(word_pattern, element):
            return element
        case str() if '"' not in element:
            return f'"{element}"'
        case str() if "'" not in element:
            return f"'{element}'"
        case _:
            raise NotDeparsableError(element)


def deparse(unique_set: UniqueSet, /) -> str:
    """Render a set in the literal syntax accepted by `parse_set`.

    Only ints, finite floats, and strings not containing both quote characters can be rendered;
    any other element raises `NotDeparsableError`.
    """
    return "{" + ", ".join(deparse_element(element) for element in unique_set) + "}"
