"""InterviewSim CV analysis: structured profile extraction from CV text."""

__version__ = "0.1.0"
