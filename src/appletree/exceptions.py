class InvalidDepthError(ValueError):
    """
    Exception raised when a depth ceiling is not a non-negative integer.

    Attributes:
        depth: The offending depth value, as given.

    Example:
        >>> error = InvalidDepthError(-1)
        >>> str(error)
        'Depth must be a non-negative integer (got -1).'
    """

    def __init__(self, depth: object) -> None:
        """
        Initialize the exception with the rejected depth value.

        Args:
            depth: The depth value that failed validation.
        """
        self.depth = depth
        super().__init__(f"Depth must be a non-negative integer (got {depth}).")


class InvalidThemeError(ValueError):
    """
    Exception raised when an unknown glyph theme is requested.

    Attributes:
        theme (str): The theme name that was requested.

    Example:
        >>> error = InvalidThemeError("square")
        >>> str(error)
        "Unknown theme 'square'. Use 'classic' or 'round'."
    """

    def __init__(self, theme: str) -> None:
        self.theme = theme
        super().__init__(f"Unknown theme '{theme}'. Use 'classic' or 'round'.")
