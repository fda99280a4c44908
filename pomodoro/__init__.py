"""Pomodoro: a focus/break interval timer with a durable session history."""

__version__ = "0.1.0"
