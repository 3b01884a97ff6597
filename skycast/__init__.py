"""
Skycast: current weather and a 24 hour forecast for a handful of cities.
"""
