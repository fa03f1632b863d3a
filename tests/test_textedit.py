import pytest

from animstudio.textedit import Key, TextEditState
from animstudio.textedit_layout import MonospaceBuffer


def make(text, cursor=None, single_line=False, **kwargs):
    buf = MonospaceBuffer(text, **kwargs)
    state = TextEditState(single_line)
    state.cursor = len(text) if cursor is None else cursor
    return buf, state


def test_typing_inserts_and_advances_cursor():
    buf, state = make("")
    state.text(buf, "ab")
    assert buf.text == "ab"
    assert state.cursor == len("ab")


def test_key_with_string_types_it():
    buf, state = make("")
    state.key(buf, "z")
    assert buf.text == "z"
    assert state.cursor == 1


def test_single_line_rejects_newline():
    buf, state = make("abc", single_line=True)
    state.text(buf, "\n")
    assert buf.text == "abc"
    assert state.cursor == 3


def test_undo_and_redo_round_trip():
    buf, state = make("")
    state.text(buf, "ab")
    state.key(buf, Key.UNDO)
    assert buf.text == ""
    assert state.cursor == 0
    state.key(buf, Key.REDO)
    assert buf.text == "ab"
    assert state.cursor == len("ab")


def test_backspace_then_undo_restores():
    buf, state = make("abc")
    state.key(buf, Key.BACKSPACE)
    assert buf.text == "abc"[:2]
    assert state.cursor == 2
    state.key(buf, Key.UNDO)
    assert buf.text == "abc"
    assert state.cursor == 3


def test_delete_removes_char_under_cursor():
    buf, state = make("abc", cursor=0)
    state.key(buf, Key.DELETE)
    assert buf.text == "abc"[1:]
    assert state.cursor == 0


def test_shift_left_selects_and_cut_removes():
    buf, state = make("hello")
    state.key(buf, Key.LEFT | Key.SHIFT)
    state.key(buf, Key.LEFT | Key.SHIFT)
    assert state.has_selection()
    assert (state.select_start, state.select_end, state.cursor) == (5, 3, 3)
    assert state.cut(buf) is True
    assert buf.text == "hello"[:3]
    assert not state.has_selection()
    assert state.cut(buf) is False


def test_paste_replaces_selection():
    buf, state = make("hello")
    state.select_start, state.select_end = 0, 5
    assert state.paste(buf, "bye") is True
    assert buf.text == "bye"
    assert state.cursor == len("bye")


def test_paste_that_does_not_fit_returns_false():
    buf, state = make("ab", max_length=3)
    assert state.paste(buf, "xyz") is False
    assert buf.text == "ab"


def test_insert_mode_overwrites_and_undo_restores():
    buf, state = make("abc", cursor=0)
    state.key(buf, Key.INSERT)
    assert state.insert_mode is True
    state.text(buf, "x")
    assert buf.text == "x" + "abc"[1:]
    assert state.cursor == 1
    state.key(buf, Key.UNDO)
    assert buf.text == "abc"


def test_line_start_and_end():
    text = "ab\ncd"
    buf, state = make(text)
    state.key(buf, Key.LINESTART)
    assert state.cursor == text.index("c")
    state.key(buf, Key.LINEEND)
    assert state.cursor == len(text)


def test_shift_line_start_selects_to_line_start():
    text = "ab\ncd"
    buf, state = make(text)
    state.key(buf, Key.LINESTART | Key.SHIFT)
    assert state.select_start == len(text)
    assert state.select_end == text.index("c")


def test_down_then_up_keeps_column():
    text = "abc\ndef"
    buf, state = make(text, cursor=1)
    state.key(buf, Key.DOWN)
    assert state.cursor == text.index("e")
    state.key(buf, Key.UP)
    assert state.cursor == 1


def test_page_down_moves_row_count_per_page():
    text = "a\nb\nc"
    buf, state = make(text, cursor=0)
    state.row_count_per_page = 2
    state.key(buf, Key.PGDOWN)
    assert state.cursor == text.index("c")


def test_up_down_in_single_line_act_as_left_right():
    buf, state = make("abc", cursor=1, single_line=True)
    state.key(buf, Key.UP)
    assert state.cursor == 0
    state.key(buf, Key.DOWN)
    assert state.cursor == 1


def test_click_places_cursor():
    text = "abc\ndef"
    buf, state = make(text, glyph_width=8.0, line_height=16.0)
    state.click(buf, 17.0, 0.0)
    assert state.cursor == 2
    assert not state.has_selection()
    state.click(buf, 1.0, 17.0)
    assert state.cursor == len("abc\n")


def test_drag_extends_selection():
    buf, state = make("abc", glyph_width=8.0)
    state.click(buf, 0.0, 0.0)
    state.drag(buf, 17.0, 0.0)
    assert (state.select_start, state.select_end, state.cursor) == (0, 2, 2)


def test_select_all_then_delete_selection():
    buf, state = make("hello", cursor=0)
    state.key(buf, Key.TEXTEND | Key.SHIFT)
    assert (state.select_start, state.select_end) == (0, len("hello"))
    state.delete_selection(buf)
    assert buf.text == ""
    assert state.cursor == 0


def test_text_start_and_end():
    buf, state = make("hello", cursor=2)
    state.key(buf, Key.TEXTEND)
    assert state.cursor == len("hello")
    state.key(buf, Key.TEXTSTART)
    assert state.cursor == 0


def test_word_right_and_left():
    text = "foo bar baz"
    buf, state = make(text, cursor=0)
    state.key(buf, Key.WORDRIGHT)
    assert state.cursor == text.index("bar")
    state.key(buf, Key.WORDLEFT)
    assert state.cursor == 0


def test_clamp_pulls_cursor_and_selection_inside():
    buf, state = make("abc")
    state.cursor, state.select_start, state.select_end = 10, 8, 9
    state.clamp(buf)
    assert state.cursor == len("abc")
    assert state.select_start == state.select_end == len("abc")


def test_sort_selection_orders_bounds():
    _, state = make("hello")
    state.select_start, state.select_end = 4, 1
    state.sort_selection()
    assert (state.select_start, state.select_end) == (1, 4)


def test_reset_clears_everything():
    buf, state = make("")
    state.text(buf, "abc")
    state.select_start = 1
    state.reset(True)
    assert state.cursor == 0
    assert not state.has_selection()
    assert state.single_line is True
    assert state.undo_state.undo_records == []


def test_shifted_undo_is_ignored():
    buf, state = make("")
    state.text(buf, "ab")
    state.key(buf, Key.UNDO | Key.SHIFT)
    assert buf.text == "ab"


@pytest.mark.parametrize("code", [0, 999])
def test_unknown_key_code_changes_nothing(code):
    buf, state = make("abc")
    state.key(buf, code)
    assert buf.text == "abc"
    assert state.cursor == 3