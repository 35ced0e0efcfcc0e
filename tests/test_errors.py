from structlab.errors import IteratorMismatchError, IteratorOutOfBoundsError


def test_out_of_bounds_default_message():
    assert str(IteratorOutOfBoundsError()) == "Iterator out of bounds exception"


def test_mismatch_default_message():
    assert str(IteratorMismatchError()) == "Iterator mismatch exception"


def test_custom_message_is_kept():
    error = IteratorOutOfBoundsError("Out Of Bounds")
    assert str(error) == "Out Of Bounds"
    assert error.message == "Out Of Bounds"


def test_mismatch_custom_message():
    assert IteratorMismatchError("wrong list").message == "wrong list"


def test_mismatch_is_caught_as_out_of_bounds():
    error = IteratorMismatchError()
    assert isinstance(error, IteratorOutOfBoundsError)
    assert error.message == "Iterator mismatch exception"


def test_out_of_bounds_is_an_index_error():
    error = IteratorOutOfBoundsError()
    assert isinstance(error, IndexError)
    assert str(error) == "Iterator out of bounds exception"