__all__ = ["NoMatchError"]


class NoMatchError(ValueError):
    """
    The input does not conform to any accepted grammar or array shape. Malformed syntax and
    out-of-range values are not told apart.
    """

    def __init__(self, src: object, what: str = "pitch or interval"):
        super().__init__(f"invalid {what} notation: {src!r}")
        self.src = src
