"""Safety check-in package.

This package is organized by feature modules (schedules, worker exceptions,
check-ins, streaks) with a thin Flask controller layer and service/repository
layers around a pure scheduling and streak engine.
"""
