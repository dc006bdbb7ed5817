# What it does: Defines every failure a twig command can report to the user
# How it does: Each precondition failure is its own exception class carrying the message printed by the command layer. Engine code raises them, `run()` functions in `commands/` catch `TwigError`, print it and exit with status 1
# What data structure it uses: A shallow class hierarchy rooted at TwigError


class TwigError(Exception):
    message = "twig: unknown error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class NotInitialized(TwigError):
    message = "Not in an initialized Twig directory."


class AlreadyInitialized(TwigError):
    message = "A Twig version-control system already exists in the current directory."


class FileNotFound(TwigError):
    message = "File does not exist."


class FileNotInCommit(TwigError):
    message = "File does not exist in that commit."


class NoSuchCommit(TwigError):
    message = "No commit with that id exists."


class AmbiguousCommitId(TwigError):
    def __init__(self, prefix):
        super().__init__(f"Commit id '{prefix}' is ambiguous.")
        self.prefix = prefix


class NoSuchObject(TwigError):
    def __init__(self, object_id):
        super().__init__(f"Object not found: {object_id}")
        self.object_id = object_id


class NoSuchBranch(TwigError):
    message = "A branch with that name does not exist."


class BranchAlreadyExists(TwigError):
    message = "A branch with that name already exists."


class InvalidBranchName(TwigError):
    message = "Not a valid branch name."


class CannotRemoveCurrentBranch(TwigError):
    message = "Cannot remove the current branch."


class SelfCheckoutOrSelfMerge(TwigError):
    pass


class SelfCheckout(SelfCheckoutOrSelfMerge):
    message = "No need to checkout the current branch."


class SelfMerge(SelfCheckoutOrSelfMerge):
    message = "Cannot merge a branch with itself."


class UntrackedObstruction(TwigError):
    message = "There is an untracked file in the way; delete it, or add and commit it first."

    def __init__(self, files=()):
        super().__init__()
        self.files = sorted(files)


class UncommittedChanges(TwigError):
    message = "You have uncommitted changes."


class NoChangesStaged(TwigError):
    message = "No changes added to the commit."


class EmptyCommitMessage(TwigError):
    message = "Please enter a commit message."


class NothingToRemove(TwigError):
    message = "No reason to remove the file."


class NoCommitWithMessage(TwigError):
    message = "Found no commit with that message."


class InvalidConfigKey(TwigError):
    message = "Invalid key format. Should be 'section.key'."
