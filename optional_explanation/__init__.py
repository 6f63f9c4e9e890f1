from optional_explanation import demo
from optional_explanation import examples
from optional_explanation import option
from optional_explanation import util
from optional_explanation.option import EMPTY
from optional_explanation.option import Empty
from optional_explanation.option import IllegalAccessError
from optional_explanation.option import Option


__all__ = ["EMPTY", "Empty", "IllegalAccessError", "Option", "demo", "examples", "option", "util"]
