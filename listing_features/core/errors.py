class ParseError(ValueError):
    """Raw payload does not have the shape of a map search response."""


class UnknownCategoryError(KeyError):
    """Category name has no search path in the lookup table."""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"unknown category: {self.category!r}"
