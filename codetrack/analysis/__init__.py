"""
Analysis module for CodeTrack.

Pure statistics over a user's problems: solve counts, streaks, and the
series behind the analytics charts.
"""
