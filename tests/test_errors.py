from pzmap.errors import FileEndNotReached, PzMapError, ReaderError


def test_file_end_not_reached_message_and_fields():
    error = FileEndNotReached(12, 40)
    assert str(error) == "File end not reached: 12 / 40"
    assert error.offset == 12
    assert error.size == 40


def test_file_end_not_reached_is_package_error():
    error = FileEndNotReached(3, 7)
    assert isinstance(error, PzMapError)
    assert error.args == ("File end not reached: 3 / 7",)


def test_reader_error_is_a_value_error():
    error = ReaderError("buffer is too small")
    assert isinstance(error, ValueError)
    assert isinstance(error, PzMapError)
    assert str(error) == "buffer is too small"