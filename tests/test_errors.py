"""Tests for field-element errors."""

import copy
import pickle

import pytest

from primefield.errors import DifferentFieldsError, FieldElementError, InvalidElementError


@pytest.mark.parametrize("cls", [DifferentFieldsError, InvalidElementError])
def test_fixed_message(cls):
    err = cls()
    assert str(err) == cls.message
    assert isinstance(err, FieldElementError)


@pytest.mark.parametrize("cls", [DifferentFieldsError, InvalidElementError])
def test_pickle_round_trip(cls):
    err = pickle.loads(pickle.dumps(cls()))
    assert type(err) is cls
    assert str(err) == cls.message


@pytest.mark.parametrize("cls", [DifferentFieldsError, InvalidElementError])
def test_copy(cls):
    err = copy.copy(cls())
    assert type(err) is cls
    assert str(err) == cls.message
    assert str(copy.deepcopy(cls())) == cls.message
