"""Interview Questions - personal interview-practice question manager."""

__version__ = "0.1.0"
__app_id__ = "io.github.numockmate.InterviewQuestions"
__app_name__ = "Interview Questions Manager"
