"""
weatherlib - reusable libraries for Skycast: caching, HTTP JSON helpers and
the Open-Meteo and GeoNames API clients.
"""
