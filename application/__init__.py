"""
Application Layer for the Workout Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Session lifecycle, history, user info and plan workflows
- exceptions: Errors translated to HTTP statuses by the app factory
"""
