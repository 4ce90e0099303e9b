import pytest

from procdeck.keys import Binding, KeyMsg, KeyType, Mode, default_keymap, matches


def test_full_help_includes_command():
    km = default_keymap()
    found = any(":" in b.keys for group in km.full_help() for b in group)
    assert found


def test_quit_help_mentions_ctrl_c():
    km = default_keymap()
    assert "ctrl+c" in km.quit.help_key.lower()


@pytest.mark.parametrize(
    "msg, expected",
    [
        (KeyMsg(KeyType.RUNES, "a"), "a"),
        (KeyMsg(KeyType.RUNES, "a", alt=True), "alt+a"),
        (KeyMsg(KeyType.ENTER), "enter"),
        (KeyMsg(KeyType.ESC), "esc"),
        (KeyMsg(KeyType.CTRL_C), "ctrl+c"),
        (KeyMsg(KeyType.PGDOWN), "pgdown"),
        (KeyMsg(KeyType.SHIFT_TAB), "shift+tab"),
        (KeyMsg(KeyType.SPACE), " "),
    ],
)
def test_keymsg_str(msg, expected):
    assert str(msg) == expected


def test_binding_matches_any_key():
    km = default_keymap()
    assert km.up.matches(KeyMsg(KeyType.RUNES, "k"))
    assert km.up.matches(KeyMsg(KeyType.UP))
    assert not km.up.matches(KeyMsg(KeyType.RUNES, "j"))
    assert km.page_up.matches(KeyMsg(KeyType.CTRL_B))


def test_disabled_binding_never_matches():
    b = Binding(keys=("x",), enabled=False)
    assert b.matches(KeyMsg(KeyType.RUNES, "x")) is False


def test_matches_helper_checks_all_bindings():
    km = default_keymap()
    assert matches(KeyMsg(KeyType.RUNES, "x"), km.start, km.stop) is True
    assert matches(KeyMsg(KeyType.RUNES, "z"), km.start, km.stop) is False


def test_quick_jump_keys_cover_digits():
    km = default_keymap()
    assert [b.keys for b in km.quick_jump_keys] == [(str(n),) for n in range(1, 10)]
    assert km.quick_jump.matches(KeyMsg(KeyType.RUNES, "5"))


def test_short_help_contents():
    km = default_keymap()
    assert [b.help_key for b in km.short_help()] == ["k/↑", "j/↓", "s", "x", "/", "?", ":"]


@pytest.mark.parametrize(
    "mode, label",
    [
        (Mode.NORMAL, "NORMAL"),
        (Mode.GROUP_PICKER, "GROUP"),
        (Mode.BRANCH_PICKER, "BRANCH"),
        (Mode.FILTER, "FILTER"),
        (Mode.ATTACH, "ATTACH"),
        (Mode.EMBEDDED_ATTACH, "TERM"),
        (Mode.HELP, "HELP"),
        (Mode.COMMAND, "COMMAND"),
        (Mode.LOG_FOCUS, "LOG"),
    ],
)
def test_mode_labels(mode, label):
    assert str(mode) == label