from procdeck.ansi import display_width, strip_ansi
from procdeck.inputs import (
    CommandCancelMsg,
    CommandInput,
    CommandRunMsg,
    FilterCancelMsg,
    FilterCommitMsg,
    FilterInput,
    ShowToastMsg,
    TextInput,
)
from procdeck.keys import KeyMsg, KeyType


def rune(ch):
    return KeyMsg(KeyType.RUNES, ch)


# ---- TextInput ----


def test_text_input_typing_and_backspace():
    ti = TextInput()
    ti.focus()
    for ch in "abc":
        assert ti.update(rune(ch))
    assert ti.value == "abc"
    ti.update(KeyMsg(KeyType.BACKSPACE))
    assert ti.value == "ab"


def test_text_input_ignores_keys_when_blurred():
    ti = TextInput()
    assert ti.update(rune("a")) is False
    assert ti.value == ""


def test_text_input_char_limit():
    ti = TextInput(char_limit=3)
    ti.focus()
    for ch in "abcdef":
        ti.update(rune(ch))
    assert ti.value == "abc"
    ti.set_value("wxyz")
    assert ti.value == "wxy"


def test_text_input_cursor_editing():
    ti = TextInput()
    ti.focus()
    ti.set_value("hello")
    ti.update(KeyMsg(KeyType.HOME))
    ti.update(rune(">"))
    assert ti.value == ">hello"
    ti.update(KeyMsg(KeyType.END))
    ti.update(KeyMsg(KeyType.LEFT))
    ti.update(KeyMsg(KeyType.DELETE))
    assert ti.value == ">hell"


def test_text_input_delete_word_and_line():
    ti = TextInput()
    ti.focus()
    ti.set_value("set nu")
    ti.update(KeyMsg(KeyType.CTRL_W))
    assert ti.value == "set "
    ti.update(KeyMsg(KeyType.CTRL_U))
    assert ti.value == ""


def test_text_input_view_shows_placeholder_and_value():
    ti = TextInput(placeholder="hint", prompt="> ")
    assert strip_ansi(ti.view()) == "> hint"
    ti.set_value("go")
    assert strip_ansi(ti.view()) == "> go "


# ---- FilterInput ----


def test_filter_enter_with_valid_regex_emits_commit():
    fi = FilterInput()
    fi.show()
    fi.set_value("error")
    msg = fi.update(KeyMsg(KeyType.ENTER))
    assert isinstance(msg, FilterCommitMsg)
    assert msg.text == "error"
    assert msg.regex.search("an ERROR here")
    assert not fi.visible


def test_filter_enter_with_invalid_regex_emits_toast():
    fi = FilterInput()
    fi.show()
    fi.set_value("(unclosed")
    msg = fi.update(KeyMsg(KeyType.ENTER))
    assert isinstance(msg, ShowToastMsg)
    assert msg.text.startswith("invalid regex")
    assert msg.level == 1
    assert fi.visible


def test_filter_esc_emits_cancel():
    fi = FilterInput()
    fi.show()
    fi.set_value("something")
    assert fi.update(KeyMsg(KeyType.ESC)) == FilterCancelMsg()
    assert not fi.visible


def test_filter_view_is_single_line_bar():
    fi = FilterInput()
    fi.show()
    fi.set_value("err")
    view = fi.view(60)
    assert view != ""
    assert "\n" not in view
    assert strip_ansi(view).startswith("/")
    assert display_width(view) == 60


def test_filter_view_hidden_returns_empty():
    assert FilterInput().view(60) == ""


def test_filter_empty_enter_commits_nil_regex():
    fi = FilterInput()
    fi.show()
    fi.set_value("")
    assert fi.update(KeyMsg(KeyType.ENTER)) == FilterCommitMsg(None, "")


def test_filter_typing_routes_to_input():
    fi = FilterInput()
    fi.show()
    for ch in "warn":
        assert fi.update(rune(ch)) is None
    assert fi.value == "warn"


# ---- CommandInput ----


def test_command_enter_with_text_emits_run():
    ci = CommandInput()
    ci.show()
    ci.input.set_value("q")
    assert ci.update(KeyMsg(KeyType.ENTER)) == CommandRunMsg("q")
    assert not ci.visible


def test_command_empty_enter_emits_cancel():
    ci = CommandInput()
    ci.show()
    assert ci.update(KeyMsg(KeyType.ENTER)) == CommandCancelMsg()


def test_command_esc_emits_cancel():
    ci = CommandInput()
    ci.show()
    ci.input.set_value("anything")
    assert ci.update(KeyMsg(KeyType.ESC)) == CommandCancelMsg()
    assert not ci.visible


def test_command_show_clears_text():
    ci = CommandInput()
    ci.show()
    ci.update(rune("w"))
    assert ci.value == "w"
    ci.show()
    assert ci.value == ""


def test_command_view_is_single_line_bar():
    ci = CommandInput()
    ci.show()
    view = ci.view(60)
    assert "\n" not in view
    assert strip_ansi(view).startswith(":")
    assert display_width(view) == 60


def test_command_view_truncates_to_width():
    ci = CommandInput()
    ci.show()
    ci.input.set_value("x" * 40)
    view = ci.view(10)
    assert display_width(view) == 10
    assert "…" in strip_ansi(view)