import pytest

from tsnat.span import SourceMap, Span


def test_span_line_col():
    sm = SourceMap()
    file_id = sm.add_file("test.ts", "hello\nworld")
    assert sm.line_col(Span(file_id, 6, 11)) == (2, 1)


def test_line_col_first_line():
    sm = SourceMap()
    file_id = sm.add_file("test.ts", "hello\nworld")
    assert sm.line_col(Span(file_id, 3, 4)) == (1, 4)


def test_line_col_counts_characters_not_bytes():
    sm = SourceMap()
    file_id = sm.add_file("a.ts", "é = 1")
    # "é" is two bytes; the "=" starts at byte 3.
    assert sm.line_col(Span(file_id, 3, 4)) == (1, 3)


def test_line_col_inside_a_character_is_rejected():
    sm = SourceMap()
    file_id = sm.add_file("a.ts", "é")
    with pytest.raises(ValueError):
        sm.line_col(Span(file_id, 1, 2))


def test_line_col_past_end_is_rejected():
    sm = SourceMap()
    file_id = sm.add_file("a.ts", "ab")
    with pytest.raises(ValueError):
        sm.line_col(Span(file_id, 10, 11))


def test_file_ids_are_sequential_and_line_starts_recorded():
    sm = SourceMap()
    first = sm.add_file("a.ts", "x")
    second = sm.add_file("b.ts", "a\nb\nc")
    assert (first, second) == (0, 1)
    assert sm.get_file(second).line_starts == [0, 2, 4]
    assert sm.get_file(first).content == "x"
    assert len(sm) == 2


def test_get_unknown_file():
    with pytest.raises(IndexError):
        SourceMap().get_file(0)


def test_merge_covers_both():
    merged = Span(0, 5, 8).merge(Span(0, 2, 6))
    assert merged == Span(0, 2, 8)
    assert len(merged) == 6


def test_merge_across_files_is_rejected():
    with pytest.raises(ValueError):
        Span(0, 0, 1).merge(Span(1, 0, 1))


def test_dummy_span():
    assert Span.DUMMY == Span(0, 0, 0)