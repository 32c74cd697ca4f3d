"""Unit tests for the Ok / Err result types."""

import pytest

from stockroom.application.result import Err, Ok
from stockroom.domain.exceptions import EntityNotFoundError, InvalidOperationError


class TestOk:

    def test_unwrap_returns_value(self):
        assert Ok(5).unwrap() == 5
        assert Ok(5).is_ok()

    def test_equality_by_value(self):
        assert Ok("cake") == Ok("cake")
        assert Ok(1) != Ok(2)


class TestErr:

    def test_message_from_error(self):
        err = Err(EntityNotFoundError("A product with id=3 was not found"))
        assert not err.is_ok()
        assert err.message == "A product with id=3 was not found"

    def test_unwrap_reraises(self):
        err = Err(InvalidOperationError("Stock amount must be greater than zero."))
        with pytest.raises(InvalidOperationError, match="greater than zero"):
            err.unwrap()
