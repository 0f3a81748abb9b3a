"""Prompt Construction Package"""

from smartcommit.prompts.builder import PromptBuilder, PromptConfig

__all__ = ["PromptBuilder", "PromptConfig"]
