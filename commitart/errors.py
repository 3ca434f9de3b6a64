"""Exceptions raised by the matrix, calendar, planning and git layers."""


class CommitArtError(Exception):
    """Base class for every error the command line reports."""


class InvalidInput(CommitArtError, ValueError):
    pass


class UnknownGlyph(CommitArtError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"Letter '{char}' is not defined in the font")


class WidthExceeded(CommitArtError):
    def __init__(self, required, maximum, word=None):
        self.required = required
        self.maximum = maximum
        self.word = word
        subject = f'Word "{word}"' if word else "Word matrix"
        super().__init__(
            f"{subject} is too long for the contribution graph. "
            f"Required width: {required}, maximum allowed: {maximum}"
        )


class MissingIdentity(CommitArtError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "Git author identity is not configured (missing: "
            + ", ".join(self.missing)
            + '). Run: git config --global user.name "Your Name" && '
            'git config --global user.email "you@example.com"'
        )


class ExternalOperationFailure(CommitArtError):
    def __init__(self, command, output="", completed=None):
        self.command = list(command)
        self.output = output
        self.completed = completed
        msg = f"Failed to execute Git command: {' '.join(self.command)}"
        if completed is not None:
            msg += f" ({completed} commits completed before the failure)"
        if output:
            msg += f"\n{output.strip()}"
        super().__init__(msg)
