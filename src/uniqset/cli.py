__all__ = ["app"]

import logging
import sys
from enum import Enum
from typing import Annotated

import typer
from returns.result import Failure, Success

from ._parser import deparse, deparse_element, parse_set
from ._unique_set import UniqueSet

logger = logging.getLogger(__name__)

app = typer.Typer()


class Operation(str, Enum):
    # Python 3.10 does not support StrEnum, so do it manually
    union = "union"
    intersect = "intersect"
    difference = "difference"
    subset = "subset"
    superset = "superset"
    proper_subset = "proper-subset"
    proper_superset = "proper-superset"
    empty = "empty"
    to_list = "list"

    def arity(self) -> tuple[int, int | None]:
        """Minimum and maximum number of sets, where None means unbounded."""
        match self:
            case Operation.union | Operation.intersect:
                return 1, None
            case Operation.empty | Operation.to_list:
                return 1, 1
            case _:
                return 2, 2

    def __str__(self) -> str:
        return self.value


def configure_logging(verbose: bool) -> None:
    logger.handlers.clear()
    if not verbose:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


def apply(operation: Operation, first: UniqueSet, rest: list[UniqueSet]) -> UniqueSet | bool:
    match operation:
        case Operation.union:
            return first.union(*rest)
        case Operation.intersect:
            return first.intersect(*rest)
        case Operation.difference:
            return first.difference(rest[0])
        case Operation.subset:
            return first.is_subset_of(rest[0])
        case Operation.superset:
            return first.is_superset_of(rest[0])
        case Operation.proper_subset:
            return first.is_proper_subset_of(rest[0])
        case Operation.proper_superset:
            return first.is_proper_superset_of(rest[0])
        case Operation.empty:
            return first.is_empty()
        case _:
            raise NotImplementedError(f"No result for {operation}")


@app.command()
def uniqset(
    operation: Annotated[
        Operation,
        typer.Argument(show_default=False, help="The operation to apply to the sets."),
    ],
    set_strings: Annotated[
        list[str],
        typer.Argument(
            show_default=False,
            help='The sets on which to operate, written as literals, e.g. {1, 2, "a"}.',
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each step to standard error."),
    ] = False,
):
    configure_logging(verbose)

    minimum, maximum = operation.arity()
    if len(set_strings) < minimum or (maximum is not None and len(set_strings) > maximum):
        expected = str(minimum) if minimum == maximum else f"at least {minimum}"
        typer.echo(
            f"Operation {operation} takes {expected} sets, but got {len(set_strings)}", err=True
        )
        raise typer.Exit(1)

    # Parse sets
    sets = []
    for set_string in set_strings:
        match parse_set(set_string):
            case Failure(error):
                typer.echo(f"Failed to parse set:\n{error}", err=True)
                raise typer.Exit(1)
            case Success(parsed_set):
                pass
            case _:
                raise NotImplementedError()

        logger.debug("Parsed %r with %d elements", set_string, len(parsed_set))
        sets.append(parsed_set)

    first, *rest = sets
    if operation == Operation.to_list:
        for element in first:
            typer.echo(deparse_element(element))
        return

    logger.debug("Applying %s to %d sets", operation, len(sets))
    match apply(operation, first, rest):
        case bool(answer):
            typer.echo("true" if answer else "false")
        case UniqueSet() as answer:
            typer.echo(deparse(answer))
        case _:
            raise NotImplementedError()
