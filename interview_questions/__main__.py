#!/usr/bin/env python3
"""Entry point for Interview Questions."""

import sys

from interview_questions.app import main


if __name__ == "__main__":
    sys.exit(main())
