from dataclasses import dataclass, field, fields


HELP_LINES = (
    "j/down  k/up  g/G  first/last",
    "space toggle check   i toggle important   d remove",
    "a add item   n new file   q quit",
)

ITEM_PROMPT_HELP = (
    "Enter add   Tab toggle important   Esc cancel",
)

FILE_PROMPT_HELP = (
    "Enter create and open   Esc cancel",
    "The new list starts with one item.",
)

SINGLE_CELL_FIELDS = {"border_h", "border_v", "border_corner"}


@dataclass(frozen=True)
class Theme:
    """Glyphs and text used by the presenter. Built once at startup."""

    title: str = "--- Your Todo List ---"
    cursor: str = "> "
    checked: str = "[x]"
    unchecked: str = "[ ]"
    empty: str = "(no items yet, press 'a' to add one)"
    border_h: str = "-"
    border_v: str = "|"
    border_corner: str = "+"
    help_lines: tuple = field(default=HELP_LINES)
    item_prompt_help: tuple = field(default=ITEM_PROMPT_HELP)
    file_prompt_help: tuple = field(default=FILE_PROMPT_HELP)

    @property
    def no_cursor(self) -> str:
        return " " * len(self.cursor)

    @classmethod
    def from_config(cls, cfg) -> "Theme":
        overrides = cfg.get("THEME") if isinstance(cfg, dict) else None
        if not isinstance(overrides, dict):
            return cls()
        allowed = {f.name for f in fields(cls) if f.type is str}
        kwargs = {}
        for key, value in overrides.items():
            if key not in allowed or not isinstance(value, str) or not value:
                continue
            # single-cell glyphs keep the modal box aligned
            if key in SINGLE_CELL_FIELDS and len(value) != 1:
                continue
            kwargs[key] = value
        return cls(**kwargs)
