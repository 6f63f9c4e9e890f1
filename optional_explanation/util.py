import dataclasses
import os

from optional_explanation.option import Option


def getenv(key: str, convert=str) -> Option:
    """Look up an envvar, converting it if present."""
    return Option.from_nullable(os.environ.get(key)).map(convert)


def env(key, convert=str, **kwargs):
    """
    A factory around `dataclasses.field` that can be used to load or default
    an envvar. If you wish to load from an external source, do that first and
    inject it's keys/values into os.environ before instantiating your
    dataclass.

    Args:
        key: in the format of either KEY or KEY:DEFAULT
        convert: a function that accepts a string and returns a different type
        kwargs: any kwargs to be passed to `dataclasses.field`

    Returns:
        dataclasses.field

    Raises:
        KeyError: in the event an envvar isn't found and doesn't have a default
    """
    key, partition, default = key.partition(":")

    def fallback():
        # if a partition was detected use anything after it, even an empty string
        if partition == ":":
            return convert(default)
        raise KeyError(key)

    def default_factory():
        return getenv(key, convert).value_or_eval(fallback)

    return dataclasses.field(default_factory=default_factory, **kwargs)
