"""
Walk through the examples, printing what each evaluation chain produced.
"""
import dataclasses
import math
import sys

from loguru import logger

from optional_explanation import examples
from optional_explanation import util
from optional_explanation.option import EMPTY
from optional_explanation.option import Option


@dataclasses.dataclass(frozen=True)
class Config:
    log_level: str = util.env("OPTIONAL_EXPLANATION_LOG_LEVEL:INFO", convert=str.upper)


def setup_logging(config: Config) -> int:
    """Replace loguru's default handler with bare messages on stdout, returning the new handler's id."""
    logger.remove()
    return logger.add(sys.stdout, level=config.log_level, format="{message}")


def describe(label: str, result: Option[float]) -> str:
    return result.map(lambda value: "{} is {:f}".format(label, value)).value_or_eval(
        lambda: "{} is invalid".format(label)
    )


def _square_roots() -> Option[float]:
    invalid_res = examples.safe_square_root(-1)
    assert invalid_res == EMPTY, "the square root of -1 should be empty"

    valid_res = examples.safe_square_root(1)
    assert valid_res.has_value(), "the square root of 1 should be populated"
    return valid_res


def _evaluation_chains(start: Option[float]):
    logger.info(describe("sad value", examples.evaluate_imperatively(start)))

    result = examples.evaluate_chain(start)
    assert result == examples.evaluate_imperatively(start), "both evaluation styles should agree"
    logger.info(describe("value", result))

    # fallbacks, eager then lazy
    logger.info("got value {:f}", result.value_or(math.nan))
    logger.info("got value {:f}", result.value_or_eval(examples.get_default))


def _middle_names():
    person = examples.maybe_load_from_file()

    assert examples.capitalize_middle_name_imperatively(person) == EMPTY, "John Doe has no middle name"
    assert examples.capitalize_middle_name(person) == EMPTY, "John Doe has no middle name"


def _combined_options():
    a = Option(5)
    b = Option()

    assert examples.add_options_imperatively(a, b) == EMPTY, "5 + nothing should be empty"
    assert examples.add_options(a, b) == EMPTY, "5 + nothing should be empty"


def main(config: Config | None = None) -> int:
    """Run the demonstration, an AssertionError means an example misbehaved."""
    config = config or Config()
    handler_id = setup_logging(config)

    try:
        _evaluation_chains(_square_roots())
        _middle_names()
        _combined_options()

    except AssertionError as ex:
        logger.error("Demonstration failed: {}", ex)
        raise

    finally:
        logger.debug("Demonstration finished")
        logger.remove(handler_id)

    return 0
