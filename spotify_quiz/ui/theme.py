"""Shared colors for the Flet UI."""

BG = "#0F172A"
BG_CARD = "#111C31"
BG_INPUT = "#1E293B"
BORDER = "#334155"
FG = "#E2E8F0"
FG_DIM = "#94A3B8"
FG_LINK = "#60A5FA"
ACCENT = "#1DB954"
DANGER = "#EF4444"
SELECTED = "#FF2464"
