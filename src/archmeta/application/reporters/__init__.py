"""Reporters rendering augmented model metadata."""

from archmeta.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = ["ConsoleConfig", "ConsoleReporter"]
