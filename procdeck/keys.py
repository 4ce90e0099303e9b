"""Key events, keybindings and input modes for the terminal UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyType(enum.Enum):
    """Kind of a key event; the value is the key's canonical name."""

    RUNES = "runes"
    SPACE = " "
    ENTER = "enter"
    TAB = "tab"
    SHIFT_TAB = "shift+tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESC = "esc"
    INSERT = "insert"

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PGUP = "pgup"
    PGDOWN = "pgdown"

    SHIFT_UP = "shift+up"
    SHIFT_DOWN = "shift+down"
    SHIFT_LEFT = "shift+left"
    SHIFT_RIGHT = "shift+right"
    SHIFT_HOME = "shift+home"
    SHIFT_END = "shift+end"

    CTRL_UP = "ctrl+up"
    CTRL_DOWN = "ctrl+down"
    CTRL_LEFT = "ctrl+left"
    CTRL_RIGHT = "ctrl+right"
    CTRL_HOME = "ctrl+home"
    CTRL_END = "ctrl+end"
    CTRL_PGUP = "ctrl+pgup"
    CTRL_PGDOWN = "ctrl+pgdown"

    CTRL_SHIFT_UP = "ctrl+shift+up"
    CTRL_SHIFT_DOWN = "ctrl+shift+down"
    CTRL_SHIFT_LEFT = "ctrl+shift+left"
    CTRL_SHIFT_RIGHT = "ctrl+shift+right"
    CTRL_SHIFT_HOME = "ctrl+shift+home"
    CTRL_SHIFT_END = "ctrl+shift+end"

    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"

    CTRL_AT = "ctrl+@"
    CTRL_A = "ctrl+a"
    CTRL_B = "ctrl+b"
    CTRL_C = "ctrl+c"
    CTRL_D = "ctrl+d"
    CTRL_E = "ctrl+e"
    CTRL_F = "ctrl+f"
    CTRL_G = "ctrl+g"
    CTRL_H = "ctrl+h"
    CTRL_J = "ctrl+j"
    CTRL_K = "ctrl+k"
    CTRL_L = "ctrl+l"
    CTRL_N = "ctrl+n"
    CTRL_O = "ctrl+o"
    CTRL_P = "ctrl+p"
    CTRL_Q = "ctrl+q"
    CTRL_R = "ctrl+r"
    CTRL_S = "ctrl+s"
    CTRL_T = "ctrl+t"
    CTRL_U = "ctrl+u"
    CTRL_V = "ctrl+v"
    CTRL_W = "ctrl+w"
    CTRL_X = "ctrl+x"
    CTRL_Y = "ctrl+y"
    CTRL_Z = "ctrl+z"
    CTRL_BACKSLASH = "ctrl+\\"
    CTRL_CLOSE_BRACKET = "ctrl+]"
    CTRL_CARET = "ctrl+^"
    CTRL_UNDERSCORE = "ctrl+_"


@dataclass(frozen=True)
class KeyMsg:
    """A single key press."""

    type: KeyType
    runes: str = ""
    alt: bool = False

    def __str__(self) -> str:
        name = self.runes if self.type is KeyType.RUNES else self.type.value
        return f"alt+{name}" if self.alt else name


@dataclass(frozen=True)
class Binding:
    """A set of key names bound to one action, with its help text."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, msg: KeyMsg) -> bool:
        """Report whether the key event triggers this binding."""
        return self.enabled and str(msg) in self.keys


def matches(msg: KeyMsg, *args: Binding) -> bool:
    """Report whether the key event triggers any of the given bindings."""
    return any(binding.matches(msg) for binding in args)


def _bind(keys: tuple[str, ...], help_key: str = "", help_desc: str = "") -> Binding:
    return Binding(keys=keys, help_key=help_key, help_desc=help_desc)


@dataclass(frozen=True)
class KeyMap:
    """All keybindings of the application."""

    up: Binding
    down: Binding
    start: Binding
    restart: Binding
    stop: Binding
    attach: Binding
    group_picker: Binding
    branch_picker: Binding
    git_fetch: Binding
    git_pull: Binding
    stop_all: Binding
    filter: Binding
    next_match: Binding
    prev_match: Binding
    page_up: Binding
    page_down: Binding
    top: Binding
    bottom: Binding
    clear_log: Binding
    edit_config: Binding
    help: Binding
    command: Binding
    quit: Binding
    esc: Binding
    enter: Binding
    quick_jump_keys: tuple[Binding, ...]
    quick_jump: Binding
    copy_enter: Binding
    copy_motion: Binding
    copy_visual: Binding
    copy_yank: Binding
    mouse_select: Binding
    attach_paste: Binding

    def short_help(self) -> list[Binding]:
        """Bindings shown in the status bar."""
        return [self.up, self.down, self.start, self.stop, self.filter, self.help, self.command]

    def full_help(self) -> list[list[Binding]]:
        """Bindings grouped by category for the help overlay."""
        return [
            [self.up, self.down, self.quick_jump],
            [self.start, self.restart, self.stop, self.attach],
            [self.group_picker, self.branch_picker, self.git_fetch, self.git_pull, self.stop_all],
            [
                self.filter,
                self.next_match,
                self.prev_match,
                self.page_up,
                self.page_down,
                self.top,
                self.bottom,
                self.clear_log,
                self.edit_config,
            ],
            [self.copy_enter, self.copy_motion, self.copy_visual, self.copy_yank],
            [self.mouse_select, self.attach_paste],
            [self.help, self.command, self.quit, self.esc],
        ]


def default_keymap() -> KeyMap:
    """Return the default keybindings."""
    digits = tuple(str(n) for n in range(1, 10))
    return KeyMap(
        up=_bind(("k", "up"), "k/↑", "prev process"),
        down=_bind(("j", "down"), "j/↓", "next process"),
        start=_bind(("s",), "s", "start"),
        restart=_bind(("r",), "r", "restart"),
        stop=_bind(("x",), "x", "stop"),
        attach=_bind(("a",), "a", "attach"),
        group_picker=_bind(("S",), "S", "start group"),
        branch_picker=_bind(("c", "b"), "c", "checkout branch"),
        git_fetch=_bind(("f",), "f", "git fetch"),
        git_pull=_bind(("p",), "p", "git pull --ff-only"),
        stop_all=_bind(("X",), "X", "stop all"),
        filter=_bind(("/",), "/", "search logs"),
        next_match=_bind(("n",), "n", "next match"),
        prev_match=_bind(("N",), "N", "prev match"),
        page_up=_bind(("pgup", "ctrl+b"), "PgUp", "scroll up"),
        page_down=_bind(("pgdown", "ctrl+f"), "PgDn", "scroll down"),
        top=_bind(("g",), "g", "scroll top"),
        bottom=_bind(("G",), "G", "scroll bottom"),
        clear_log=_bind(("ctrl+l",), "ctrl+l", "clear log buffer"),
        edit_config=_bind(("ctrl+e",), "ctrl+e", "edit config + reload"),
        help=_bind(("?",), "?", "toggle help"),
        command=_bind((":",), ":", "command (e.g. :q)"),
        quit=_bind(("ctrl+c",), "ctrl+c", "force quit"),
        esc=_bind(("esc",), "esc", "cancel"),
        enter=_bind(("enter",), "enter", "confirm"),
        quick_jump_keys=tuple(_bind((d,)) for d in digits),
        quick_jump=_bind(digits, "1-9", "jump to project"),
        copy_enter=_bind(("tab",), "tab", "log focus"),
        copy_motion=_bind(("hjkl",), "hjklwbeWBE0^$+-ggG", "focus: motions"),
        copy_visual=_bind(("v",), "v/V / fFtT;,", "focus: visual / find-char"),
        copy_yank=_bind(("y",), 'yy Y yiw ya" yi(', "focus: yank (operator+text obj)"),
        mouse_select=_bind(("mouse",), "drag", "log: mouse select → release copies"),
        attach_paste=_bind(("paste",), "Cmd-V / Ctrl-Shift-V", "attach: paste → child PTY"),
    )


class Mode(enum.IntEnum):
    """Input mode of the UI; determines how keys are routed."""

    NORMAL = 0
    GROUP_PICKER = 1
    BRANCH_PICKER = 2
    FILTER = 3
    ATTACH = 4
    EMBEDDED_ATTACH = 5
    HELP = 6
    COMMAND = 7
    LOG_FOCUS = 8

    def __str__(self) -> str:
        return _MODE_LABELS.get(self, "UNKNOWN")


_MODE_LABELS = {
    Mode.NORMAL: "NORMAL",
    Mode.GROUP_PICKER: "GROUP",
    Mode.BRANCH_PICKER: "BRANCH",
    Mode.FILTER: "FILTER",
    Mode.ATTACH: "ATTACH",
    Mode.EMBEDDED_ATTACH: "TERM",
    Mode.HELP: "HELP",
    Mode.COMMAND: "COMMAND",
    Mode.LOG_FOCUS: "LOG",
}