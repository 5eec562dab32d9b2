import sys
import logging
from dynsha256.input_gen import prepare_inputs, parse_argument_value, parse_return_value

logger = logging.getLogger(__name__)


class Circuit:
    """
    Native evaluation of a circuit entry function.

    The entry function's annotations declare the exact shape of every input
    (``Private[Array[field, 1024]]``, ``Public[field]``, ...). Arguments are
    checked against that shape and converted to field elements before the
    function runs, and its output is converted back to plain integers.
    Constraints are ``assert`` statements, so a failed constraint raises
    ``AssertionError``. This holds for ``verify`` too: it returns ``False``
    only when every constraint holds and the output differs from
    ``return_value``.
    """

    def __init__(self, func):
        if sys.flags.optimize:
            raise RuntimeError("Circuit constraints are assert statements and are removed under python -O.")
        self.func = func
        self.argument_names = func.__code__.co_varnames[:func.__code__.co_argcount]
        self.argument_types = func.__annotations__
        self.return_type = self.argument_types.get('return', None)

    @property
    def name(self):
        return self.func.__name__

    def prepare_inputs(self, *args, **kwargs):
        return prepare_inputs(self.argument_names, self.argument_types, *args, **kwargs)

    def __call__(self, *args, **kwargs):
        inputs = self.prepare_inputs(*args, **kwargs)
        logger.debug("Evaluating circuit %s", self.name)
        output = self.func(**inputs)
        return parse_return_value(output, self.return_type)

    def verify(self, *args, return_value=None, **kwargs):
        if return_value is None:
            raise ValueError("Missing return value for verification.")

        expected = parse_return_value(
            parse_argument_value(return_value, self.return_type, 'return'),
            self.return_type,
        )
        result = self(*args, **kwargs) == expected
        logger.debug("Verified circuit %s: %s", self.name, result)
        return result
