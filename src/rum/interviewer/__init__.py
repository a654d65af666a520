"""Interviewer framework: the line-based input source behind every prompt."""

from rum.interviewer.base import Interviewer
from rum.interviewer.console import ConsoleInterviewer
from rum.interviewer.queue_interviewer import QueueInterviewer
from rum.interviewer.recording import QAPair, RecordingInterviewer

__all__ = [
    "Interviewer",
    "ConsoleInterviewer",
    "QueueInterviewer",
    "RecordingInterviewer",
    "QAPair",
]
