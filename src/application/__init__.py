"""Application layer."""

from .client import OpenJudgeClient

__all__ = ["OpenJudgeClient"]
