import operator
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from backend.config import ERROR_TEXT, INITIAL_DISPLAY, INT_MAX, INT_MIN
from backend.keys import Key, UnknownKeyError
from backend.logging_config import get_logger

log = get_logger("engine")

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")


class CalculatorError(Exception):
    pass


class InvalidOperandError(CalculatorError):
    pass


class DivisionByZeroError(CalculatorError):
    pass


class ArithmeticOverflowError(CalculatorError, OverflowError):
    pass


def _check_range(value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise ArithmeticOverflowError(f"Result out of range: {value}")
    return value


def parse_operand(text: str) -> int:
    """
    Parse display text as a signed base-10 integer.
    Only an optional leading '-' followed by digits is accepted.
    """
    if not isinstance(text, str) or not _INTEGER_LITERAL.fullmatch(text):
        raise InvalidOperandError(f"Not an integer: {text!r}")
    return _check_range(int(text))


def _truncating_div(left: int, right: int) -> int:
    # Python's // floors; the calculator truncates toward zero.
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_OPERATIONS: Dict[Key, Callable[[int, int], int]] = {
    Key.ADD: operator.add,
    Key.SUBTRACT: operator.sub,
    Key.MULTIPLY: operator.mul,
    Key.DIVIDE: _truncating_div,
}


def apply_operator(op: Key, left: int, right: int) -> int:
    """Apply one of + - * / to two integers, enforcing the 64-bit range."""
    try:
        fn = _OPERATIONS[op]
    except KeyError:
        raise CalculatorError(f"Not an arithmetic operator: {op}") from None
    return _check_range(fn(left, right))


@dataclass
class EngineState:
    """
    Everything the engine remembers between key presses.

    start_new_entry: the next digit starts a fresh number.
    operand_ready: a right-hand operand was supplied since the last operator.
    """
    accumulator: str = INITIAL_DISPLAY
    pending_operand: Optional[int] = None
    pending_operator: Optional[Key] = None
    start_new_entry: bool = True
    operand_ready: bool = True
    memory: int = 0


class CalculatorEngine:
    def __init__(self, state: Optional[EngineState] = None):
        self.state = state if state is not None else EngineState()

    # -------------------------
    # State helpers
    # -------------------------
    @property
    def memory(self) -> int:
        return self.state.memory

    @property
    def display(self) -> str:
        return self.state.accumulator

    def reset(self):
        """Back to the power-on state, memory included."""
        self.state = EngineState()

    def clear(self):
        """The C key: drop the expression, keep memory."""
        self.state = EngineState(memory=self.state.memory)

    # -------------------------
    # Entry point
    # -------------------------
    def handle_key_press(self, key: Union[str, Key], current_display: Optional[str] = None) -> str:
        """
        Interpret one key press and return the text the display must show next.

        current_display is the verbatim display text; when omitted the engine's
        own accumulator is used. Arithmetic failures never propagate: they are
        shown as ERROR_TEXT and the expression is cleared (memory survives).
        """
        display = self.state.accumulator if current_display is None else current_display
        try:
            if not isinstance(key, Key):
                key = Key.from_label(key)
        except UnknownKeyError as e:
            log.warning("Ignoring key press: %s", e)
            return display

        try:
            result = self._dispatch(key, display)
        except CalculatorError as e:
            log.warning("Key %s on display %r failed: %s", key.label, display, e)
            self.clear()
            self.state.accumulator = ERROR_TEXT
            return ERROR_TEXT

        self.state.accumulator = result
        log.debug("Key %s: %r -> %r", key.label, display, result)
        return result

    def _dispatch(self, key: Key, display: str) -> str:
        if key.is_digit:
            return self._press_digit(key.digit, display)
        if key.is_operator:
            return self._press_operator(key, display)
        handlers = {
            Key.EQUALS: self._press_equals,
            Key.CLEAR: self._press_clear,
            Key.MEMORY_STORE: self._press_memory_store,
            Key.MEMORY_RECALL: self._press_memory_recall,
            Key.MEMORY_CLEAR: self._press_memory_clear,
            Key.SQUARE: self._press_square,
        }
        return handlers[key](display)

    # -------------------------
    # Key handlers
    # -------------------------
    def _press_digit(self, digit: str, display: str) -> str:
        st = self.state
        if st.start_new_entry:
            if st.pending_operator is None:
                # fresh expression after '=' or a recall
                st.pending_operand = None
            st.start_new_entry = False
            st.operand_ready = True
            return digit

        current = parse_operand(display)
        text = digit if display == "0" else display + digit
        try:
            _check_range(int(text))
        except ArithmeticOverflowError:
            log.debug("Digit %s ignored, %r would overflow", digit, text)
            return str(current)
        st.operand_ready = True
        return text

    def _press_operator(self, op: Key, display: str) -> str:
        st = self.state
        value = parse_operand(display)
        if st.pending_operator is not None and not st.operand_ready:
            # two operators in a row: the later one wins
            st.pending_operator = op
            return str(st.pending_operand)

        if st.pending_operator is not None:
            value = apply_operator(st.pending_operator, st.pending_operand, value)
        st.pending_operand = value
        st.pending_operator = op
        st.start_new_entry = True
        st.operand_ready = False
        return str(value)

    def _press_equals(self, display: str) -> str:
        st = self.state
        right = parse_operand(display)
        if st.pending_operator is None:
            result = right
        else:
            result = apply_operator(st.pending_operator, st.pending_operand, right)
        st.pending_operator = None
        st.pending_operand = None
        st.start_new_entry = True
        st.operand_ready = True
        return str(result)

    def _press_clear(self, display: str) -> str:
        self.clear()
        return INITIAL_DISPLAY

    def _press_memory_store(self, display: str) -> str:
        self.state.memory = parse_operand(display)
        return display

    def _press_memory_recall(self, display: str) -> str:
        self.state.start_new_entry = True
        self.state.operand_ready = True
        return str(self.state.memory)

    def _press_memory_clear(self, display: str) -> str:
        self.state.memory = 0
        return display

    def _press_square(self, display: str) -> str:
        value = parse_operand(display)
        self.state.start_new_entry = True
        self.state.operand_ready = True
        return str(_check_range(value * value))
