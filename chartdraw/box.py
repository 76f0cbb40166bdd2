from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Axis-aligned pixel rectangle.

    Also used for padding, where each edge is an inset and 0 means unset.
    """

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_zero(self) -> bool:
        return self.top == 0 and self.left == 0 and self.right == 0 and self.bottom == 0

    def center(self) -> tuple[int, int]:
        return (self.left + (self.width // 2), self.top + (self.height // 2))

    def grow(self, other: "Box") -> "Box":
        return Box(
            top=min(self.top, other.top),
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def get_top(self, default: int = 0) -> int:
        return self.top if self.top != 0 else default

    def get_left(self, default: int = 0) -> int:
        return self.left if self.left != 0 else default

    def get_right(self, default: int = 0) -> int:
        return self.right if self.right != 0 else default

    def get_bottom(self, default: int = 0) -> int:
        return self.bottom if self.bottom != 0 else default
