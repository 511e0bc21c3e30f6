"""
Application Layer for the GymTrack Progression API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- exceptions: Errors shared by the application and infrastructure layers
"""
