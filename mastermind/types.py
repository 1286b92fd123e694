"""
Labels for clarity.
"""

from typing import List, Literal, Tuple

Color = Literal["red", "blue", "green", "yellow", "orange", "purple"]
Code = List[str]  # 4 colors, secret or guess
GameStatus = Literal["not_started", "in_progress", "won", "lost"]

# Fixed rules: no difficulty levels
COLORS: Tuple[Color, ...] = ("red", "blue", "green", "yellow", "orange", "purple")
CODE_LENGTH = 4
MAX_ATTEMPTS = 3
