"""Ordinal formatting.

A caller-supplied number is normalized into a magnitude and sign, then rendered by the rule
registered for the locale's language subtag.
"""
