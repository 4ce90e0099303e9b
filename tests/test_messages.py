import pytest

from procdeck.messages import (
    QUIT_ARM_WINDOW,
    ConfigEditedMsg,
    GitInfoMsg,
    PortInfoMsg,
    ProcStatsMsg,
    QuitArm,
    RuntimeChangedMsg,
    StartGroupRequest,
    attach_end_toast,
    copied_toast,
    embedded_dimensions,
    pty_dimensions,
    quick_jump_index,
)
from procdeck.toast import ToastLevel


def test_quit_arm_first_press_arms():
    arm = QuitArm()
    assert arm.press(100.0) is False
    assert arm.armed_at == 100.0


def test_quit_arm_second_press_within_window_quits():
    arm = QuitArm()
    arm.press(100.0)
    assert arm.press(100.0 + QUIT_ARM_WINDOW / 2) is True


def test_quit_arm_press_after_window_rearms():
    arm = QuitArm()
    arm.press(100.0)
    later = 100.0 + QUIT_ARM_WINDOW * 3
    assert arm.press(later) is False
    assert arm.armed_at == later
    assert arm.press(later + QUIT_ARM_WINDOW / 2) is True


def test_quit_arm_uses_clock_by_default():
    arm = QuitArm()
    assert arm.press() is False
    assert arm.press() is True


def test_attach_end_toast_empty_reason_is_detached():
    assert attach_end_toast("   ") == ("detached", ToastLevel.INFO)


def test_attach_end_toast_failure_is_error():
    text, level = attach_end_toast("child write failed: broken pipe (api)")
    assert text == "child write failed: broken pipe (api)"
    assert level is ToastLevel.ERR


def test_attach_end_toast_error_word_is_error():
    _, level = attach_end_toast("read error")
    assert level is ToastLevel.ERR


def test_attach_end_toast_trims():
    text, level = attach_end_toast("  bye  ")
    assert text == "bye"
    assert level is ToastLevel.INFO


def test_embedded_dimensions_minimums():
    assert embedded_dimensions(0, 0) == (20, 5)


def test_embedded_dimensions_fill_pane():
    assert embedded_dimensions(120, 40) == (120, 40)


def test_pty_dimensions_minimums():
    assert pty_dimensions(0, 0) == (40, 10)


def test_pty_dimensions_inset_invariant():
    cols, rows = pty_dimensions(200, 60)
    assert cols == 200 - 4
    assert rows == 60 - 4


def test_copied_toast_singular_and_plural():
    assert copied_toast(1, 5) == "copied 1 line (5 chars)"
    assert copied_toast(3, 16) == "copied 3 lines (16 chars)"


@pytest.mark.parametrize("n,rows", [(0, 5), (-1, 5), (6, 5), (1, 0)])
def test_quick_jump_out_of_range(n, rows):
    assert quick_jump_index(n, rows) is None


def test_quick_jump_in_range():
    assert quick_jump_index(1, 3) == 0
    assert quick_jump_index(3, 3) == 2


def test_message_defaults():
    assert ProcStatsMsg("api").ok is False
    assert PortInfoMsg("api").port == 0
    assert ConfigEditedMsg().error is None
    assert RuntimeChangedMsg().snapshot == ()
    assert GitInfoMsg("api", {"branch": "main"}).info == {"branch": "main"}


def test_messages_compare_by_value():
    assert StartGroupRequest("all") == StartGroupRequest("all")
    assert StartGroupRequest("all") != StartGroupRequest("web")