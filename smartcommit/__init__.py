"""
SmartCommit

Conventional commit messages generated from redacted staged changes.
"""

__version__ = "0.1.0"

# Centralized commit types - single source of truth
# Used by: message/model.py (type parsing), prompts/builder.py, cli/args.py (argparse)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'perf': 'Performance improvement',
    'ci': 'CI/CD configuration changes',
    'build': 'Build system or external dependency changes',
    'revert': 'Reverts a previous commit',
}

# List of type names for validation and argparse
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

DEFAULT_COMMIT_TYPE = 'chore'
