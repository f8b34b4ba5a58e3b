"""Core contracts package.

Composition:
    - `result_types`: closed set of outcomes for one generateContent call.
"""
