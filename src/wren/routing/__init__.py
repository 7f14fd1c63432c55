"""Routing — ordered route table, pattern compiler, and reverse generator.

Routes are matched in declaration order against lazily compiled,
cached regexes. Named routes can be turned back into URLs.
"""
