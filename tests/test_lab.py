"""
Tests for HeterogeneousSequenceLab.
"""

import logging

import pytest

from erasure.errors import (
    BypassUnavailable,
    ConfigError,
    InvalidOperation,
    LabStateError,
    TypeMismatch,
)
from erasure.lab import HeterogeneousSequenceLab, LabConfig
from erasure.types import IntType, StringType

EXPECTED_OPAQUE = (
    "The Strings collection value is: ['string value 1', 'string value 2', "
    "'string value 3', '5', 'string value 4', 'string value 5']"
)


@pytest.fixture
def lab():
    lab = HeterogeneousSequenceLab()
    lab.initialize()
    return lab


def test_initialize_layout(lab):
    assert len(lab.sequence) == 6
    assert lab.sequence.get(3) == 5
    types = lab.sequence.types()
    assert types[3] == IntType()
    assert all(t == StringType() for i, t in enumerate(types) if i != 3)


def test_initialize_twice_is_rejected(lab):
    with pytest.raises(LabStateError):
        lab.initialize()


def test_reads_require_initialize():
    lab = HeterogeneousSequenceLab()
    with pytest.raises(LabStateError):
        lab.format_opaque()


def test_format_opaque(lab):
    assert lab.format_opaque() == EXPECTED_OPAQUE


def test_format_opaque_repeatable(lab):
    assert lab.format_opaque() == lab.format_opaque()


def test_format_assuming_declared_fails_at_foreign_index(lab):
    with pytest.raises(TypeMismatch) as exc_info:
        lab.format_assuming_declared()
    err = exc_info.value
    assert err.index == 3
    assert err.operation == "reverse"
    assert err.actual == IntType()
    assert err.expected == StringType()
    assert err.value == 5


def test_format_assuming_declared_without_foreign_value():
    lab = HeterogeneousSequenceLab()
    for value in lab.config.declared_values:
        lab.sequence.append(value)
    lab.initialized = True
    assert lab.format_assuming_declared() == (
        "The Strings collection with values in reverse order is: ['1 eulav gnirts', "
        "'2 eulav gnirts', '3 eulav gnirts', '4 eulav gnirts', '5 eulav gnirts']"
    )


def test_attempt_invalid_operation_on_foreign_element(lab):
    with pytest.raises(InvalidOperation) as exc_info:
        lab.attempt_invalid_operation()
    err = exc_info.value
    assert err.operation == "length"
    assert err.actual == IntType()
    assert err.expected == StringType()
    assert isinstance(err.__cause__, TypeError)
    assert not isinstance(err, TypeMismatch)


@pytest.mark.parametrize("index", [0, 1, 2, 4, 5])
def test_length_succeeds_at_string_positions(lab, index):
    assert lab.element_length(index) == len("string value 1")
    assert lab.attempt_invalid_operation(index).endswith("got 14")


def test_disabled_bypass_aborts_initialize():
    lab = HeterogeneousSequenceLab(LabConfig(allow_unsafe=False))
    with pytest.raises(BypassUnavailable):
        lab.initialize()
    assert not lab.initialized
    assert len(lab.sequence) == 0


def test_custom_foreign_position():
    lab = HeterogeneousSequenceLab(LabConfig(foreign_value=2.5, foreign_index=1))
    lab.initialize()
    assert lab.sequence.get(1) == 2.5
    with pytest.raises(TypeMismatch) as exc_info:
        lab.format_assuming_declared()
    assert exc_info.value.index == 1
    assert exc_info.value.actual.name == "float"


def test_strings_reversed_before_mismatch(lab, caplog):
    with caplog.at_level(logging.DEBUG, logger="erasure.lab"):
        with pytest.raises(TypeMismatch):
            lab.format_assuming_declared()
    reversed_lines = [
        r.getMessage()
        for r in caplog.records
        if r.name == "erasure.lab" and r.getMessage().startswith("reversed index")
    ]
    assert reversed_lines == [
        "reversed index 0: '1 eulav gnirts'",
        "reversed index 1: '2 eulav gnirts'",
        "reversed index 2: '3 eulav gnirts'",
    ]


@pytest.mark.parametrize("foreign_index", [-1, 6, 10])
def test_foreign_index_out_of_range_rejected(foreign_index):
    with pytest.raises(ConfigError):
        LabConfig(foreign_index=foreign_index)


@pytest.mark.parametrize("foreign_index", [0, 5])
def test_foreign_index_at_either_end(foreign_index):
    lab = HeterogeneousSequenceLab(LabConfig(foreign_index=foreign_index))
    lab.initialize()
    assert len(lab.sequence) == 6
    assert lab.sequence.get(foreign_index) == 5
    with pytest.raises(InvalidOperation):
        lab.attempt_invalid_operation()
