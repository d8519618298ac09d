from leetcode_notes.api.routes.notes import NoteController
from leetcode_notes.api.routes.problems import ProblemController

__all__ = ["NoteController", "ProblemController"]
