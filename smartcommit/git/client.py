"""Git Client - Thin wrapper over the git executable."""

import subprocess


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""
    pass


class NoStagedChangesError(GitError):
    """Raised when nothing is staged for commit."""
    pass


class DiffRetrievalError(GitError):
    """Raised when the staged diff can't be read."""
    pass


class CommitError(GitError):
    """Raised when git refuses to create the commit."""
    pass


class GitClient:
    """Runs the handful of git commands the commit flow needs."""

    def __init__(self, cwd: str | None = None):
        self.cwd = cwd

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stripped stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def is_repository(self) -> bool:
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            return False
        return True

    def has_staged_changes(self) -> bool:
        try:
            return self._run_git('diff', '--cached', '--name-only') != ''
        except GitError:
            return False

    def get_staged_diff(self) -> str:
        """Get the diff of staged changes.

        Raises:
            NotARepositoryError: outside a repository.
            NoStagedChangesError: the index matches HEAD.
            DiffRetrievalError: git failed while producing the diff.
        """
        if not self.is_repository():
            raise NotARepositoryError("Not a git repository")

        try:
            diff = self._run_git('diff', '--cached')
        except GitError as e:
            raise DiffRetrievalError(str(e))

        if not diff:
            raise NoStagedChangesError("No staged changes found. Use 'git add' to stage changes")

        return diff

    def commit(self, message: str) -> None:
        if not self.is_repository():
            raise NotARepositoryError("Not a git repository")

        try:
            self._run_git('commit', '-m', message)
        except GitError as e:
            raise CommitError(f"Failed to commit: {e}")
