from typing import Optional


class UnsupportedWidthError(ValueError):
    """
    Raised when a digest is requested at a bit width that can't be produced.
    Widths must fall between `min_width` and `max_width`, inclusive, and some
    operations further require a canonical FNV width.
    """

    def __init__(
        self,
        length: int,
        min_width: int,
        max_width: int,
        message: Optional[str] = None,
    ):
        self.length = length
        self.min_width = min_width
        self.max_width = max_width

        if not message:
            message = f"length must be between {min_width} and {max_width}, inclusive; received {length}"

        super().__init__(message)
