# procdeck

Building blocks for a keyboard-driven terminal dashboard that runs and
watches a set of project processes. The package holds the state and
decision logic that do not depend on a particular rendering toolkit: key
events and bindings, input modes, overlay state, toast notifications, key
translation for an embedded terminal, and the messages the UI passes around.

## What is inside

- `procdeck.keys` — `KeyType`, `KeyMsg`, `Binding`, `KeyMap`,
  `default_keymap()` and `matches()` for routing key presses, plus the
  `Mode` enum, whose labels are `NORMAL`, `GROUP`, `BRANCH`, `FILTER`,
  `ATTACH`, `TERM`, `HELP`, `COMMAND` and `LOG`.
- `procdeck.attach_keys` — `msg_to_key()` translates a `KeyMsg` into a
  `KeyPressEvent` (a `KeyCode` or character code plus `KeyMod` bits), or
  returns `None` when the key has no equivalent.
- `procdeck.ansi` — `Style`, `strip_ansi()`, `display_width()`,
  `truncate()` and `box()` for ANSI-aware rendering with 256-colour styles.
- `procdeck.toast` — `ToastStack` keeps at most five `Toast` notices, each
  with a `ToastLevel` and an expiry time on the monotonic clock;
  `prune()` drops expired ones and `view()` renders them one per line.
- `procdeck.detach` — `KeyDetach` watches key events for the Esc Esc
  handshake used to leave embedded attach mode, handing a lone Esc back
  once the window passes; `normalise_paste()` turns CRLF and LF into CR.
- `procdeck.group_picker` — `GroupPicker`, a sorted list of group names
  that returns a `StartGroupMsg` on Enter.
- `procdeck.branch_picker` — `BranchPicker`, a branch list with a live
  case-insensitive substring filter that returns a `CheckoutBranchMsg`.
- `procdeck.inputs` — `TextInput`, plus `FilterInput` (the `/` bar, which
  compiles a case-insensitive regex and returns `FilterCommitMsg`,
  `FilterCancelMsg` or a `ShowToastMsg` for a bad pattern) and
  `CommandInput` (the `:` bar, which returns `CommandRunMsg` or
  `CommandCancelMsg`).
- `procdeck.help` — `HelpOverlay`, a bordered box listing a keymap's
  `full_help()` groups as columns, and `OverlaySet`, which holds every
  overlay and the toast stack.
- `procdeck.messages` — message types exchanged between the UI and the
  process layer, `QuitArm` for press-Ctrl+C-twice-to-quit, and helpers for
  pane dimensions (`embedded_dimensions()`, `pty_dimensions()`), toast
  wording (`attach_end_toast()`, `copied_toast()`) and `quick_jump_index()`.

## Example

```python
from procdeck.keys import KeyMsg, KeyType, default_keymap, matches
from procdeck.branch_picker import BranchPicker
from procdeck.detach import KeyDetach
from procdeck.attach_keys import msg_to_key

keymap = default_keymap()
print(matches(KeyMsg(KeyType.RUNES, "j"), keymap.down))  # True

picker = BranchPicker(["main", "dev", "feature/login"])
picker.show()
for ch in "login":
    picker.update(KeyMsg(KeyType.RUNES, ch))
print(picker.update(KeyMsg(KeyType.ENTER)))  # CheckoutBranchMsg(branch='feature/login')

detector = KeyDetach()
print(detector.feed(KeyMsg(KeyType.ESC)))  # (True, False, b'')
print(detector.feed(KeyMsg(KeyType.ESC)))  # (True, True, b'')

print(msg_to_key(KeyMsg(KeyType.CTRL_A)))  # code 97 ('a') with KeyMod.CTRL
```

## What this package does not do

procdeck is a library of parts, not a finished application. It has no
command to run, does not start, stop or supervise processes, does not open
PTYs or bridge a terminal to one, and contains no terminal emulator. It does
not parse or dispatch `:` commands, launch an editor, load or reload
configuration, or run git. The overlays keep state and render strings; the
main loop that routes keys, draws the screen and acts on the returned
messages is left to the program using the package.

## Requirements

Python 3.10 or later and `wcwidth`.