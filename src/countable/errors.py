
"""
Base class for ALL errors that countable should ever throw.
"""

# -------------
# - BASE ERRORS


class CountableException(Exception):
    """
    Base countable exception - should be at the root of every exception.
    """


class BadInputException(CountableException):
    """
    Are you _sure_ you meant that?
    """

    def __init__(self, argument=None):
        super().__init__(argument)
        self.argument = argument

    def __str__(self):
        return repr(self.argument)


InputIntegrityError = BadInputException


# -------------


# ---------------
# - RULE ERRORS


class RuleDefinitionError(BadInputException):
    """
    A rule could not be built from the data it was given.
    """


class PatternCompileError(RuleDefinitionError):
    """
    The source text of a pattern rule is not a valid regular expression.

    Only raised when a match mapping is built in strict mode - otherwise the offending rule is kept, but can never
    match.
    """

    def __init__(self, pattern, cause=None):
        super().__init__(pattern)
        self.pattern = pattern
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return "cannot compile pattern {!r}".format(self.pattern)
        return "cannot compile pattern {!r}: {}".format(self.pattern, self.cause)
