"""
Turns an AppState into a Frame without touching the terminal.

A Frame is a list of lines; a line is a list of (text, style) spans. Style
names are mapped to curses attributes by ScreenPainter.
"""

from app_state import Mode


STYLE_NORMAL = "normal"
STYLE_CURSOR = "cursor"
STYLE_CHECKED = "checked"
STYLE_IMPORTANT = "important"
STYLE_TITLE = "title"
STYLE_HELP = "help"
STYLE_BORDER = "border"
STYLE_CARET = "caret"
STYLE_STATUS = "status"
STYLE_ERROR = "error"

FIELD_MIN_W = 10
FIELD_MAX_W = 50
FIELD_DEFAULT_W = 40


def line_text(line) -> str:
    return "".join(text for text, _ in line)


def line_width(line) -> int:
    return sum(len(text) for text, _ in line)


def frame_text(frame) -> list[str]:
    return [line_text(line) for line in frame]


def item_style(item) -> str:
    if item.checked:
        return STYLE_CHECKED
    if item.important:
        return STYLE_IMPORTANT
    return STYLE_NORMAL


# ---------- base list ----------
def _item_lines(model, theme):
    if not model.names:
        return [[(theme.no_cursor, STYLE_NORMAL), (theme.empty, STYLE_HELP)]]

    lines = []
    for idx, name in enumerate(model.names):
        item = model.items[name]
        selected = idx == model.cursor
        marker = theme.cursor if selected else theme.no_cursor
        box = theme.checked if item.checked else theme.unchecked
        lines.append(
            [
                (marker, STYLE_CURSOR if selected else STYLE_NORMAL),
                (f"{box} ", STYLE_NORMAL),
                (name, item_style(item)),
            ]
        )
    return lines


def render_list(state, theme):
    lines = [[(theme.title, STYLE_TITLE)], []]
    lines.extend(_item_lines(state.model, theme))
    lines.append([])
    for help_line in theme.help_lines:
        lines.append([(help_line, STYLE_HELP)])
    if state.file_path:
        lines.append([(f"file: {state.file_path}", STYLE_HELP)])
    if state.status_msg:
        style = STYLE_ERROR if state.status_is_error else STYLE_STATUS
        lines.append([(state.status_msg, style)])
    return lines


# ---------- modal ----------
def _field_width(width):
    if width <= 0:
        return FIELD_DEFAULT_W
    return max(FIELD_MIN_W, min(FIELD_MAX_W, width - 8))


def _field_line(prompt, field_w):
    visible, caret = prompt.window(field_w)
    visible = visible.ljust(field_w)
    return [
        ("> ", STYLE_NORMAL),
        (visible[:caret], STYLE_NORMAL),
        (visible[caret], STYLE_CARET),
        (visible[caret + 1 :], STYLE_NORMAL),
    ]


def _modal_content(state, theme):
    field_w = _field_width(state.width)
    if state.mode == Mode.CREATING_ITEM:
        flag = "yes" if state.draft_important else "no"
        content = [
            [("Add item", STYLE_TITLE)],
            [],
            _field_line(state.item_draft, field_w),
            [(f"Important: {flag}", STYLE_IMPORTANT if state.draft_important else STYLE_NORMAL)],
            [],
        ]
        help_lines = theme.item_prompt_help
    else:
        content = [
            [("New file", STYLE_TITLE)],
            [],
            _field_line(state.file_draft, field_w),
            [],
        ]
        help_lines = theme.file_prompt_help
    content.extend([(text, STYLE_HELP)] for text in help_lines)
    if state.status_msg:
        style = STYLE_ERROR if state.status_is_error else STYLE_STATUS
        content.append([])
        content.append([(state.status_msg, style)])
    return content


def render_modal(state, theme):
    content = _modal_content(state, theme)
    inner_w = max(line_width(line) for line in content)
    edge = theme.border_corner + theme.border_h * (inner_w + 2) + theme.border_corner

    modal = [[(edge, STYLE_BORDER)]]
    for line in content:
        pad = " " * (inner_w - line_width(line))
        modal.append(
            [(theme.border_v + " ", STYLE_BORDER)]
            + list(line)
            + [(pad + " ", STYLE_NORMAL), (theme.border_v, STYLE_BORDER)]
        )
    modal.append([(edge, STYLE_BORDER)])
    return modal


# ---------- composition ----------
def _cells(line):
    return [(ch, style) for text, style in line for ch in text]


def _spans(cells):
    line = []
    for ch, style in cells:
        if line and line[-1][1] == style:
            line[-1] = (line[-1][0] + ch, style)
        else:
            line.append((ch, style))
    return line


def _splice(line, left, insert):
    cells = _cells(line)
    if len(cells) < left:
        cells.extend([(" ", STYLE_NORMAL)] * (left - len(cells)))
    ins = _cells(insert)
    cells[left : left + len(ins)] = ins
    return _spans(cells)


def overlay(base, modal, height, width):
    """Place ``modal`` centered over ``base``; top-left when the size is unknown."""
    modal_h = len(modal)
    modal_w = max((line_width(line) for line in modal), default=0)
    if height <= 0 or width <= 0:
        top, left = 0, 0
    else:
        top = max(0, (height - modal_h) // 2)
        left = max(0, (width - modal_w) // 2)

    result = [list(line) for line in base]
    while len(result) < top + modal_h:
        result.append([])
    for i, mline in enumerate(modal):
        result[top + i] = _splice(result[top + i], left, mline)
    return result


def render(state, theme):
    frame = render_list(state, theme)
    if state.mode != Mode.BROWSING:
        frame = overlay(frame, render_modal(state, theme), state.height, state.width)
    return frame
