"""Category display metadata."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryStyle:
    """Presentation hints for a spending category.

    Attributes:
        icon: Icon class identifier (Font Awesome).
        background: Background colour class.
        text: Foreground colour class.
    """

    icon: str
    background: str
    text: str

    @property
    def color(self) -> str:
        """Background and text classes joined for direct use in markup."""
        return f"{self.background} {self.text}"
