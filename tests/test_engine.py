"""Engine tests: key sequences fed the way the window feeds them."""

import logging

import pytest

from backend.config import ERROR_TEXT, INT_MAX, INT_MIN
from backend.engine import (
    ArithmeticOverflowError,
    CalculatorEngine,
    DivisionByZeroError,
    EngineState,
    InvalidOperandError,
    apply_operator,
    parse_operand,
)
from backend.keys import Key


@pytest.fixture
def engine():
    return CalculatorEngine()


def press(engine, *labels):
    """Feed labels one by one, passing the previous output back as the display."""
    display = engine.display
    for label in labels:
        display = engine.handle_key_press(label, display)
    return display


# --- Initial state ---

def test_initial_state(engine):
    assert engine.state == EngineState()
    assert engine.display == "0"
    assert engine.memory == 0
    assert engine.state.pending_operator is None
    assert engine.state.start_new_entry is True


# --- Digit entry ---

def test_digits_concatenate(engine):
    assert press(engine, "1", "2", "3", "4") == "1234"


def test_leading_zero_is_replaced(engine):
    assert press(engine, "0", "0", "7") == "7"
    assert press(engine, "0") == "70"


def test_first_digit_replaces_initial_zero(engine):
    assert press(engine, "5") == "5"


def test_digit_that_would_overflow_is_ignored(engine):
    digits = list(str(INT_MAX))
    assert press(engine, *digits) == str(INT_MAX)
    assert press(engine, "9") == str(INT_MAX)


def test_digit_after_equals_starts_fresh_expression(engine):
    press(engine, "5", "+", "3", "=")
    assert press(engine, "2", "=") == "2"
    assert engine.state.pending_operand is None


# --- Arithmetic ---

def test_addition(engine):
    assert press(engine, "5", "+", "3", "=") == "8"


def test_subtraction_goes_negative(engine):
    assert press(engine, "3", "-", "1", "0", "=") == "-7"


def test_multiplication(engine):
    assert press(engine, "1", "2", "*", "1", "2", "=") == "144"


def test_division_truncates_toward_zero(engine):
    assert press(engine, "7", "/", "2", "=") == "3"
    press(engine, "C")
    assert press(engine, "2", "-", "9", "=", "/", "2", "=") == "-3"


def test_left_to_right_no_precedence(engine):
    assert press(engine, "2", "+", "3", "*", "4", "=") == "20"


def test_operator_shows_running_total(engine):
    assert press(engine, "2", "+", "3", "*") == "5"
    assert engine.state.pending_operand == 5
    assert engine.state.pending_operator is Key.MULTIPLY


def test_repeated_operator_replaces_pending(engine):
    assert press(engine, "5", "+", "-") == "5"
    assert engine.state.pending_operator is Key.SUBTRACT
    assert press(engine, "2", "=") == "3"


def test_equals_without_operator_keeps_value(engine):
    assert press(engine, "4", "2", "=") == "42"
    assert press(engine, "=") == "42"


def test_equals_reuses_display_as_right_operand(engine):
    assert press(engine, "5", "+", "=") == "10"


def test_result_can_start_next_expression(engine):
    assert press(engine, "5", "+", "3", "=", "*", "2", "=") == "16"


# --- Clear and memory ---

def test_clear_resets_expression(engine):
    press(engine, "9", "+", "4")
    assert press(engine, "C") == "0"
    assert engine.state.pending_operand is None
    assert engine.state.pending_operator is None
    assert engine.state.start_new_entry is True


def test_clear_on_zero_is_idempotent(engine):
    assert press(engine, "C") == "0"
    assert press(engine, "C") == "0"


def test_store_clear_recall(engine):
    assert press(engine, "4", "SM", "C", "RM") == "4"


def test_store_leaves_display(engine):
    assert press(engine, "1", "2", "SM") == "12"
    assert engine.memory == 12


def test_clear_memory_twice(engine):
    press(engine, "8", "SM")
    assert press(engine, "CM") == "8"
    assert engine.memory == 0
    assert press(engine, "CM") == "8"
    assert engine.memory == 0


def test_recall_used_as_operand(engine):
    press(engine, "6", "SM", "C")
    assert press(engine, "1", "0", "-", "RM", "=") == "4"


def test_digit_after_recall_starts_new_number(engine):
    press(engine, "6", "SM")
    assert press(engine, "RM", "7") == "7"


# --- Square ---

def test_square(engine):
    assert press(engine, "3", "X^2") == "9"


def test_square_of_negative(engine):
    assert press(engine, "0", "-", "4", "=", "X^2") == "16"


def test_square_as_right_operand(engine):
    assert press(engine, "1", "+", "3", "X^2", "=") == "10"


def test_square_right_after_operator_squares_shown_operand(engine):
    assert press(engine, "5", "+", "X^2") == "25"
    assert press(engine, "=") == "30"


# --- Errors ---

def test_division_by_zero(engine):
    press(engine, "5", "SM", "C")
    assert press(engine, "6", "/", "0", "=") == ERROR_TEXT
    assert engine.state.pending_operand is None
    assert engine.state.pending_operator is None
    assert engine.state.start_new_entry is True
    assert engine.memory == 5


def test_digit_after_error_starts_fresh(engine):
    press(engine, "6", "/", "0", "=")
    assert press(engine, "7", "+", "1", "=") == "8"


def test_invalid_display_text(engine):
    assert engine.handle_key_press("+", "abc") == ERROR_TEXT
    assert engine.state.pending_operator is None


@pytest.mark.parametrize("label", ["SM", "X^2", "=", "2"])
def test_malformed_display_resets_but_keeps_memory(engine, label):
    # "7 SM + 1" leaves memory 7, a pending "+", and a number being typed
    press(engine, "7", "SM", "+", "1")
    assert engine.handle_key_press(label, "abc") == ERROR_TEXT
    assert engine.state.pending_operand is None
    assert engine.state.pending_operator is None
    assert engine.state.start_new_entry is True
    assert engine.memory == 7


@pytest.mark.parametrize("text", ["", "1.5", "+3", " 4", "1_000", "--2", "Error"])
def test_malformed_display_rejected(text):
    with pytest.raises(InvalidOperandError):
        parse_operand(text)


def test_overflow_on_multiplication(engine):
    digits = list(str(INT_MAX))
    assert press(engine, *digits, "*", "2", "=") == ERROR_TEXT


def test_overflow_on_square(engine):
    assert press(engine, "4", "0", "0", "0", "0", "0", "0", "0", "0", "0", "X^2") == ERROR_TEXT


def test_overflow_error_is_builtin_overflow():
    with pytest.raises(OverflowError):
        apply_operator(Key.MULTIPLY, INT_MAX, 2)


def test_min_int_divided_by_minus_one_overflows():
    with pytest.raises(ArithmeticOverflowError):
        apply_operator(Key.DIVIDE, INT_MIN, -1)


def test_apply_operator_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        apply_operator(Key.DIVIDE, 1, 0)


def test_error_is_logged(engine, caplog):
    with caplog.at_level(logging.WARNING, logger="calculator"):
        press(engine, "1", "/", "0", "=")
    assert "Division by zero" in caplog.text


# --- Boundary behaviour ---

def test_unknown_label_leaves_display(engine):
    press(engine, "1", "2")
    assert engine.handle_key_press("sqrt", "12") == "12"
    assert engine.display == "12"


def test_accepts_key_members(engine):
    engine.handle_key_press(Key.DIGIT_7)
    engine.handle_key_press(Key.SQUARE)
    assert engine.display == "49"


def test_display_defaults_to_accumulator(engine):
    for label in ("9", "-", "4", "="):
        engine.handle_key_press(label)
    assert engine.display == "5"


def test_reset_clears_memory(engine):
    press(engine, "3", "SM")
    engine.reset()
    assert engine.memory == 0
    assert engine.display == "0"


def test_engines_do_not_share_state():
    a = CalculatorEngine()
    b = CalculatorEngine()
    press(a, "3", "SM")
    assert b.memory == 0
