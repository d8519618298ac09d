"""Domain exceptions."""


class LeetCodeNotesError(Exception):
    """Base error for the notes application."""

    pass


class ProblemNotResolvedError(LeetCodeNotesError):
    """Input or note does not identify a LeetCode problem."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Could not resolve problem from: {value!r}")


class MissingCredentialsError(LeetCodeNotesError):
    """Session cookies are required but not configured."""

    def __init__(self):
        super().__init__("csrftoken and LEETCODE_SESSION are not configured")


class NoAcceptedSolutionsError(LeetCodeNotesError):
    """No accepted submission exists for the problem."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No accepted solutions found for {slug}")
