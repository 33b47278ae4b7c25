"""asana-flow: practice personalization engine for yoga sequencing."""

__version__ = "0.1.0"
