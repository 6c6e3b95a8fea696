class InvalidDirective(ValueError):
    """Raised when a ``%`` directive in a template is not recognized.

    Attributes:
        template: The template being parsed
        position: Index of the offending character, or ``len(template)``
            when the template ends inside a directive
        char: The offending character, or None at end of input
    """

    def __init__(self, template: str, position: int, char: str | None):
        self.template: str = template
        self.position: int = position
        self.char: str | None = char
        if char is None:
            message = (
                f"Unterminated directive at end of template {template!r}\n"
                f"Hint: Use %% for a literal percent sign"
            )
        else:
            message = (
                f"Invalid duration directive {char!r} at position {position} "
                f"in template {template!r}"
            )
        super().__init__(message)
