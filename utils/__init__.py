"""
utils package
~~~~~~~~~~~~~
Configuration constants, grid geometry and display strings.
"""
