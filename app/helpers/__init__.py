"""
Pure helpers shared by the data-access layer.
"""
