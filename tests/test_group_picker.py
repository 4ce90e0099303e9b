from procdeck.ansi import strip_ansi
from procdeck.group_picker import GroupPicker, StartGroupMsg
from procdeck.keys import KeyMsg, KeyType


def rune(ch):
    return KeyMsg(KeyType.RUNES, ch)


def test_groups_sorted():
    gp = GroupPicker({"zeta": [], "alpha": ["a"], "mid": ["m"]})
    assert gp.groups == ["alpha", "mid", "zeta"]


def test_nav_bounds():
    gp = GroupPicker({"frontend": ["web"], "backend": ["api", "db"]})
    gp.show()
    gp.update(rune("k"))
    assert gp.cursor == 0
    gp.update(rune("j"))
    assert gp.cursor == 1
    gp.update(rune("j"))
    assert gp.cursor == 1
    gp.update(KeyMsg(KeyType.UP))
    assert gp.cursor == 0


def test_enter_emits_start_group_msg():
    gp = GroupPicker({"all": ["api", "web"]})
    gp.show()
    msg = gp.update(KeyMsg(KeyType.ENTER))
    assert msg == StartGroupMsg(name="all")
    assert not gp.visible


def test_enter_uses_cursor():
    gp = GroupPicker({"frontend": ["web"], "backend": ["api"]})
    gp.show()
    gp.update(KeyMsg(KeyType.DOWN))
    assert gp.update(KeyMsg(KeyType.ENTER)) == StartGroupMsg("frontend")


def test_enter_without_groups_is_noop():
    gp = GroupPicker({})
    gp.show()
    assert gp.update(KeyMsg(KeyType.ENTER)) is None
    assert gp.visible


def test_esc_hides():
    gp = GroupPicker({"grp": ["a"]})
    gp.show()
    assert gp.update(KeyMsg(KeyType.ESC)) is None
    assert not gp.visible


def test_q_hides():
    gp = GroupPicker({"grp": ["a"]})
    gp.show()
    gp.update(rune("q"))
    assert not gp.visible


def test_show_resets_cursor():
    gp = GroupPicker({"a": [], "b": []})
    gp.show()
    gp.update(rune("j"))
    gp.show()
    assert gp.cursor == 0


def test_view_hidden_is_empty():
    assert GroupPicker({"a": []}).view(120, 40) == ""


def test_view_lists_groups_with_cursor():
    gp = GroupPicker({"frontend": ["web"], "backend": ["api"]})
    gp.show()
    text = strip_ansi(gp.view(120, 40))
    assert "Start Group" in text
    assert "> backend" in text
    assert "  frontend" in text
    assert text.startswith("╭")


def test_view_without_groups():
    gp = GroupPicker({})
    gp.show()
    assert "(no groups configured)" in strip_ansi(gp.view(80, 24))